"""
Review Model
"""

from dataclasses import dataclass

from courseadmin.models.fields import (
    PayloadError, ensure_mapping, optional_bool, optional_number, optional_str, record_id,
)


@dataclass
class Review:
    id: str
    rating: int
    user: str = ''
    video: str = ''
    comment: str = ''
    date: str = ''
    status: str = 'visible'
    is_spam: bool = False

    collection_key = 'reviews'

    @classmethod
    def from_dict(cls, data):
        ensure_mapping(data, 'Review')
        rating = int(optional_number(data, 'rating', 0))
        if not 1 <= rating <= 5:
            raise PayloadError(f'Review rating out of range: {rating}')
        user = data.get('user')
        if isinstance(user, dict):
            user = ' '.join(p for p in (user.get('name'), user.get('surname')) if p)
        return cls(
            id=record_id(data, 'Review'),
            rating=rating,
            user=user if isinstance(user, str) else '',
            video=optional_str(data, 'video', optional_str(data, 'courseTitle', '')),
            comment=optional_str(data, 'comment', ''),
            date=optional_str(data, 'date', optional_str(data, 'createdAt', '')),
            status=optional_str(data, 'status', 'visible'),
            is_spam=optional_bool(data, 'isSpam'),
        )

    @property
    def is_visible(self):
        return self.status == 'visible'

    def matches(self, term):
        term = term.lower()
        return any(term in value.lower() for value in (self.user, self.video, self.comment))
