"""
Platform User Model
"""

from dataclasses import dataclass, field

from courseadmin.models.fields import (
    ensure_mapping, optional_bool, optional_str, record_id, required_str,
)


@dataclass
class PlatformUser:
    """A learner account on the video-course platform."""
    id: str
    email: str
    name: str = ''
    surname: str = ''
    gender: str = None
    is_premium: bool = False
    status: str = 'active'
    created_at: str = None
    purchased_courses: list = field(default_factory=list)

    collection_key = 'users'

    @classmethod
    def from_dict(cls, data):
        ensure_mapping(data, 'User')
        status = optional_str(data, 'status')
        if status is None:
            status = 'active' if optional_bool(data, 'isActive', True) else 'suspended'
        courses = data.get('purchasedCourses') or []
        return cls(
            id=record_id(data, 'User'),
            email=required_str(data, 'email', 'User'),
            name=optional_str(data, 'name', ''),
            surname=optional_str(data, 'surname', ''),
            gender=optional_str(data, 'gender'),
            is_premium=optional_bool(data, 'isPremium'),
            status=status,
            created_at=optional_str(data, 'createdAt'),
            purchased_courses=[
                c.get('_id', c.get('id')) if isinstance(c, dict) else c for c in courses
            ],
        )

    @property
    def is_active(self):
        return self.status == 'active'

    @property
    def full_name(self):
        return f'{self.name} {self.surname}'.strip() or self.email

    @property
    def initials(self):
        return f'{self.name[:1]}{self.surname[:1]}'.upper() or self.email[:1].upper()
