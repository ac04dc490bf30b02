"""
Card components for EduManage.

Stat tiles, announcement items, course cards and the illustrative person cards.
"""

from .announcement import AnnouncementItem, format_publish_date
from .course import CourseCard
from .person import StudentCard, TeacherCard
from .stat_tile import StatTile

__all__ = ["AnnouncementItem", "CourseCard", "StatTile", "StudentCard", "TeacherCard", "format_publish_date"]
