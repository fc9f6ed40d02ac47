"""
Dashboard Statistics

Headline figures for the landing page, computed from the list endpoints.
"""


def compute_dashboard_stats(users, courses, payments):
    """Compute dashboard figures from three settled fetches.

    Args:
        users: Fetch of PlatformUser records
        courses: Fetch of Course records
        payments: Fetch of Payment records

    Returns:
        Dict of figures; a figure whose source failed is None.
    """
    stats = {
        'total_users': None,
        'premium_users': None,
        'active_users': None,
        'total_courses': None,
        'pack_courses': None,
        'total_videos': None,
        'completed_payments': None,
        'total_revenue': None,
        'recent_payments': [],
    }

    if users.ok:
        stats['total_users'] = len(users.data)
        stats['premium_users'] = sum(1 for u in users.data if u.is_premium)
        stats['active_users'] = sum(1 for u in users.data if u.is_active)

    if courses.ok:
        stats['total_courses'] = len(courses.data)
        stats['pack_courses'] = sum(1 for c in courses.data if c.is_pack)
        stats['total_videos'] = sum(len(c.videos) for c in courses.data)

    if payments.ok:
        completed = [p for p in payments.data if p.is_completed]
        stats['completed_payments'] = len(completed)
        stats['total_revenue'] = sum(p.amount for p in completed)
        stats['recent_payments'] = sorted(payments.data, key=lambda p: p.date, reverse=True)[:5]

    return stats
