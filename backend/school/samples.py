"""Illustrative people lists for the students and teachers tabs.

These are presentational placeholders, not backend data; nothing fetches or
mutates them.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class SampleStudent:
    id: str
    name: str
    grade: str
    avatar: str
    gpa: float
    attendance: int


@dataclass(frozen=True)
class SampleTeacher:
    id: str
    name: str
    subject: str
    avatar: str
    classes: int
    experience: str


SAMPLE_STUDENTS: Tuple[SampleStudent, ...] = (
    SampleStudent("1", "Emma Johnson", "10th", "👩‍🎓", 3.8, 95),
    SampleStudent("2", "Michael Chen", "11th", "👨‍🎓", 3.9, 92),
    SampleStudent("3", "Sarah Williams", "9th", "👩‍🎓", 3.7, 98),
    SampleStudent("4", "David Brown", "12th", "👨‍🎓", 3.6, 89),
)

SAMPLE_TEACHERS: Tuple[SampleTeacher, ...] = (
    SampleTeacher("1", "Dr. Amanda Rodriguez", "Mathematics", "👩‍🏫", 5, "8 years"),
    SampleTeacher("2", "Prof. James Wilson", "Physics", "👨‍🏫", 4, "12 years"),
    SampleTeacher("3", "Ms. Lisa Parker", "English", "👩‍🏫", 6, "6 years"),
    SampleTeacher("4", "Mr. Robert Kim", "Chemistry", "👨‍🏫", 3, "10 years"),
)

__all__ = ["SAMPLE_STUDENTS", "SAMPLE_TEACHERS", "SampleStudent", "SampleTeacher"]
