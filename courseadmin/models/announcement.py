"""
Announcement Model
"""

from dataclasses import dataclass, field

from courseadmin.models.fields import (
    PayloadError, ensure_mapping, optional_bool, optional_str, record_id, required_str,
)

RECIPIENT_OPTIONS = {
    'premium': 'Premium Users',
    'free': 'Free Users',
    'all': 'All Registered Users',
    'guests': 'Not Logged-in Users',
}


@dataclass
class Announcement:
    id: str
    title: str
    content: str
    recipients: list = field(default_factory=list)
    expiry_date: str = None
    is_active: bool = True
    created_at: str = None

    collection_key = 'announcements'

    @classmethod
    def from_dict(cls, data):
        ensure_mapping(data, 'Announcement')
        recipients = data.get('recipients') or []
        if not isinstance(recipients, list):
            raise PayloadError('Announcement recipients must be an array')
        return cls(
            id=record_id(data, 'Announcement'),
            title=required_str(data, 'title', 'Announcement'),
            content=optional_str(data, 'content', ''),
            recipients=[r for r in recipients if r in RECIPIENT_OPTIONS],
            expiry_date=optional_str(data, 'expiryDate'),
            is_active=optional_bool(data, 'isActive', True),
            created_at=optional_str(data, 'createdAt'),
        )

    @property
    def recipient_labels(self):
        return [RECIPIENT_OPTIONS[r] for r in self.recipients]
