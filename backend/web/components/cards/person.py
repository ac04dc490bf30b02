"""Person cards for the illustrative students and teachers tabs."""

from backend.school.samples import SampleStudent, SampleTeacher

from ..base import Component


def _card(avatar: str, name: str, subtitle: str, stats: list, action: str) -> str:
    esc = Component.escape
    rows = "".join(
        f'<div class="person-card__stat"><span>{esc(label)}</span><strong>{esc(value)}</strong></div>'
        for label, value in stats
    )
    return (
        '<article class="card person-card">'
        '<header class="person-card__header">'
        f'<span class="person-card__avatar" aria-hidden="true">{avatar}</span>'
        f'<div><h3 class="person-card__name">{esc(name)}</h3><p class="person-card__subtitle">{esc(subtitle)}</p></div>'
        "</header>"
        f'<div class="person-card__stats">{rows}</div>'
        f'<button type="button" class="btn btn-secondary">{esc(action)}</button>'
        "</article>"
    )


class StudentCard(Component):
    def __init__(self, student: SampleStudent):
        self.student = student

    def render(self) -> str:
        s = self.student
        return _card(s.avatar, s.name, f"{s.grade} Grade", [("GPA", s.gpa), ("Attendance", f"{s.attendance}%")], "View Details")


class TeacherCard(Component):
    def __init__(self, teacher: SampleTeacher):
        self.teacher = teacher

    def render(self) -> str:
        t = self.teacher
        return _card(t.avatar, t.name, t.subject, [("Classes", t.classes), ("Experience", t.experience)], "View Profile")
