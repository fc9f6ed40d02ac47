"""
Payment Model
"""

from dataclasses import dataclass

from courseadmin.models.fields import (
    ensure_mapping, optional_number, optional_str, record_id,
)


@dataclass
class Payment:
    id: str
    amount: float
    status: str
    user_name: str = ''
    email: str = ''
    currency: str = 'UZS'
    method: str = ''
    date: str = ''
    course_slug: str = ''

    collection_key = 'payments'

    @classmethod
    def from_dict(cls, data):
        ensure_mapping(data, 'Payment')
        return cls(
            id=record_id(data, 'Payment'),
            amount=optional_number(data, 'amount', 0),
            status=optional_str(data, 'status', 'pending'),
            user_name=optional_str(data, 'userName', ''),
            email=optional_str(data, 'email', ''),
            currency=optional_str(data, 'currency', 'UZS'),
            method=optional_str(data, 'method', ''),
            date=optional_str(data, 'date', ''),
            course_slug=optional_str(data, 'courseSlug', ''),
        )

    @property
    def is_completed(self):
        return self.status == 'completed'

    def matches(self, term):
        term = term.lower()
        return any(term in (value or '').lower()
                   for value in (self.user_name, self.email, self.course_slug))
