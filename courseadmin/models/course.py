"""
Course Models
"""

from dataclasses import dataclass, field

from courseadmin.models.fields import (
    PayloadError, ensure_mapping, optional_bool, optional_number, optional_str,
    record_id, required_str,
)

COURSE_TYPES = ('single', 'pack')
COURSE_LEVELS = ('beginner', 'intermediate', 'advanced')


@dataclass
class CourseVideo:
    id: str
    title: str
    url: str = ''
    duration: str = ''
    order: int = 0

    @classmethod
    def from_dict(cls, data):
        ensure_mapping(data, 'Course video')
        return cls(
            id=record_id(data, 'Course video'),
            title=required_str(data, 'title', 'Course video'),
            url=optional_str(data, 'url', optional_str(data, 'videoUrl', '')),
            duration=optional_str(data, 'duration', ''),
            order=int(optional_number(data, 'order', 0)),
        )


@dataclass
class Course:
    id: str
    title: str
    type: str
    slug: str = ''
    description: str = ''
    thumbnail: str = ''
    price: float = 0
    category: str = ''
    instructor: str = ''
    level: str = 'beginner'
    total_duration: str = ''
    students_enrolled: int = 0
    is_active: bool = True
    videos: list = field(default_factory=list)

    collection_key = 'courses'

    @classmethod
    def from_dict(cls, data):
        ensure_mapping(data, 'Course')
        course_type = data.get('type', 'single')
        if course_type not in COURSE_TYPES:
            raise PayloadError(f'Unknown course type {course_type!r}')
        videos = data.get('videos') or []
        return cls(
            id=record_id(data, 'Course'),
            title=required_str(data, 'title', 'Course'),
            type=course_type,
            slug=optional_str(data, 'slug', ''),
            description=optional_str(data, 'description', ''),
            thumbnail=optional_str(data, 'thumbnail', ''),
            price=optional_number(data, 'price', 0),
            category=optional_str(data, 'category', ''),
            instructor=optional_str(data, 'instructor', ''),
            level=optional_str(data, 'level', 'beginner'),
            total_duration=optional_str(data, 'totalDuration', ''),
            students_enrolled=int(optional_number(data, 'studentsEnrolled', 0)),
            is_active=optional_bool(data, 'isActive', True),
            videos=sorted(
                (CourseVideo.from_dict(v) for v in videos if isinstance(v, dict)),
                key=lambda v: v.order,
            ),
        )

    @property
    def is_pack(self):
        return self.type == 'pack'
