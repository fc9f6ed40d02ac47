"""
Company Models

Partner companies own courses and have their own company-scoped
administrators.
"""

from dataclasses import dataclass

from courseadmin.models.fields import (
    ensure_mapping, optional_bool, optional_number, optional_str, record_id, required_str,
)


@dataclass
class CompanyStats:
    admin_count: int = 0
    course_count: int = 0
    total_revenue: float = 0
    total_payments: int = 0

    @classmethod
    def from_dict(cls, data):
        ensure_mapping(data, 'Company stats')
        return cls(
            admin_count=int(optional_number(data, 'adminCount', 0)),
            course_count=int(optional_number(data, 'courseCount', 0)),
            total_revenue=optional_number(data, 'totalRevenue', 0),
            total_payments=int(optional_number(data, 'totalPayments', 0)),
        )


@dataclass
class Company:
    id: str
    name: str
    description: str = ''
    contact_email: str = None
    contact_phone: str = None
    is_active: bool = True
    created_by: str = None
    created_at: str = None
    stats: CompanyStats = None

    collection_key = 'companies'

    @classmethod
    def from_dict(cls, data):
        ensure_mapping(data, 'Company')
        creator = data.get('createdBy')
        if isinstance(creator, dict):
            creator = creator.get('name') or creator.get('email')
        stats = data.get('stats')
        return cls(
            id=record_id(data, 'Company'),
            name=required_str(data, 'name', 'Company'),
            description=optional_str(data, 'description', ''),
            contact_email=optional_str(data, 'contactEmail'),
            contact_phone=optional_str(data, 'contactPhone'),
            is_active=optional_bool(data, 'isActive', True),
            created_by=creator if isinstance(creator, str) else None,
            created_at=optional_str(data, 'createdAt'),
            stats=CompanyStats.from_dict(stats) if isinstance(stats, dict) else None,
        )
