"""
Video and Video Category Models
"""

from dataclasses import dataclass

from courseadmin.models.fields import (
    ensure_mapping, optional_bool, optional_number, optional_str, record_id, required_str,
)


@dataclass
class Video:
    """A standalone uploaded video in the public catalogue."""
    id: str
    title: str
    description: str = ''
    access: str = 'free'
    video_url: str = ''
    duration: str = ''
    thumbnail: str = ''
    is_preview: bool = False
    instructor: str = ''
    price: float = 0

    collection_key = 'videos'

    @classmethod
    def from_dict(cls, data):
        ensure_mapping(data, 'Video')
        return cls(
            id=record_id(data, 'Video'),
            title=required_str(data, 'title', 'Video'),
            description=optional_str(data, 'description', ''),
            access=optional_str(data, 'access', 'free'),
            video_url=optional_str(data, 'videoUrl', ''),
            duration=optional_str(data, 'duration', ''),
            thumbnail=optional_str(data, 'thumbnail', ''),
            is_preview=optional_bool(data, 'isPreview'),
            instructor=optional_str(data, 'instructor', ''),
            price=optional_number(data, 'price', 0),
        )


@dataclass
class VideoCategory:
    id: str
    title: str
    slug: str = ''
    description: str = ''
    price: float = 0
    image: str = ''

    collection_key = 'categories'

    @classmethod
    def from_dict(cls, data):
        ensure_mapping(data, 'Video category')
        return cls(
            id=record_id(data, 'Video category'),
            title=required_str(data, 'title', 'Video category'),
            slug=optional_str(data, 'slug', ''),
            description=optional_str(data, 'description', ''),
            price=optional_number(data, 'price', 0),
            image=optional_str(data, 'image', optional_str(data, 'thumbnail', '')),
        )
