"""
Administrator Model

The authenticated operator of the dashboard. Doubles as the Flask-Login
user object.
"""

import json
from dataclasses import dataclass

from flask_login import UserMixin

from courseadmin.models.fields import (
    PayloadError, ensure_mapping, optional_bool, optional_str, record_id, required_str,
)

ADMIN_ROLES = ('main', 'company')


@dataclass
class Administrator(UserMixin):
    id: str
    email: str
    name: str = None
    surname: str = None
    admin_role: str = None
    company_id: str = None
    image: str = None
    is_admin: bool = True

    collection_key = 'admins'

    @classmethod
    def from_dict(cls, data):
        ensure_mapping(data, 'Administrator')
        role = data.get('adminRole', data.get('admin_role'))
        if role is not None and role not in ADMIN_ROLES:
            raise PayloadError(f'Unknown admin role {role!r}')
        company_id = data.get('companyId', data.get('company_id'))
        if isinstance(company_id, dict):
            company_id = company_id.get('_id') or company_id.get('id')
        return cls(
            id=record_id(data, 'Administrator'),
            email=required_str(data, 'email', 'Administrator'),
            name=optional_str(data, 'name'),
            surname=optional_str(data, 'surname'),
            admin_role=role,
            company_id=str(company_id) if company_id else None,
            image=optional_str(data, 'image'),
            is_admin=optional_bool(data, 'isAdmin', True),
        )

    @classmethod
    def from_json(cls, blob):
        """Decode the serialized record kept in durable storage."""
        if not isinstance(blob, str):
            raise PayloadError('Administrator blob must be a string')
        return cls.from_dict(json.loads(blob))

    def to_dict(self):
        data = {'id': self.id, 'email': self.email, 'isAdmin': self.is_admin}
        optional = {
            'name': self.name,
            'surname': self.surname,
            'adminRole': self.admin_role,
            'companyId': self.company_id,
            'image': self.image,
        }
        data.update({key: value for key, value in optional.items() if value is not None})
        return data

    def to_json(self):
        return json.dumps(self.to_dict(), sort_keys=True)

    @property
    def is_main_admin(self):
        # Records written before roles existed carry no role and are main admins
        return self.admin_role in ('main', None)

    @property
    def display_name(self):
        full = ' '.join(part for part in (self.name, self.surname) if part)
        return full or self.email

    @property
    def initials(self):
        letters = ''.join(part[0] for part in (self.name, self.surname) if part)
        return (letters or self.email[0]).upper()
