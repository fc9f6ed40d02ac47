"""
Services Package

Exports all services for easy importing.
"""

from courseadmin.services.fetch import Fetch, FetchState, fetch
from courseadmin.services.stats import compute_dashboard_stats

__all__ = [
    'Fetch',
    'FetchState',
    'fetch',
    'compute_dashboard_stats',
]
