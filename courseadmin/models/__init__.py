"""
Models Package

Exports all record types for easy importing.
"""

from courseadmin.models.fields import PayloadError, decode_list, unwrap
from courseadmin.models.administrator import Administrator
from courseadmin.models.user import PlatformUser
from courseadmin.models.course import Course, CourseVideo
from courseadmin.models.video import Video, VideoCategory
from courseadmin.models.payment import Payment
from courseadmin.models.company import Company, CompanyStats
from courseadmin.models.announcement import Announcement, RECIPIENT_OPTIONS
from courseadmin.models.review import Review

__all__ = [
    'PayloadError',
    'decode_list',
    'unwrap',
    'Administrator',
    'PlatformUser',
    'Course',
    'CourseVideo',
    'Video',
    'VideoCategory',
    'Payment',
    'Company',
    'CompanyStats',
    'Announcement',
    'RECIPIENT_OPTIONS',
    'Review',
]
