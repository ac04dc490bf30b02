"""Course card for the courses tab."""

from backend.school.models import Course

from ..base import Component


class CourseCard(Component):
    def __init__(self, course: Course):
        self.course = course

    def render(self) -> str:
        c = self.course
        status = "Active" if c.is_active else "Inactive"
        return (
            f'<article class="card course-card" id="course-{self.escape(c.id)}">'
            '<header class="course-card__header">'
            "<div>"
            f'<h3 class="course-card__name">{self.escape(c.name)}</h3>'
            f'<p class="course-card__meta">Code: {self.escape(c.course_code)}</p>'
            f'<p class="course-card__meta">Department: {self.escape(c.department)}</p>'
            "</div>"
            f'<span class="badge">{self.escape(c.grade_level)}</span>'
            "</header>"
            '<div class="course-card__body">'
            '<p class="course-card__label">Description</p>'
            f'<p class="course-card__description">{self.escape(c.description or "No description available")}</p>'
            "</div>"
            '<footer class="course-card__footer">'
            f"<span>Credits: {self.escape(c.credits)}</span>"
            f'<span class="{self.classes("status", status__active=c.is_active)}">{status}</span>'
            "</footer>"
            '<button type="button" class="btn btn-secondary">Manage Course</button>'
            "</article>"
        )
