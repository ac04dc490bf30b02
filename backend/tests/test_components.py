"""
UI components: escaping, tab bodies, empty states and stat tile formatting.
"""
from __future__ import annotations

from backend.identity_access.domain import Profile
from backend.school.models import Announcement, Course, DisplayStats
from backend.web.components import AuthForm, Layout, LoadingPage, Navigation, render_tab
from backend.web.components.cards.announcement import format_publish_date
from backend.web.dashboard import DashboardView


def _view(tab: str = "dashboard", **overrides) -> DashboardView:
    base = dict(
        active_tab=tab,
        user=None,
        profile=Profile(id="u1", email="a@b.com", full_name="A B", role="teacher"),
        courses=(),
        announcements=(),
        stats=DisplayStats(),
    )
    base.update(overrides)
    return DashboardView(**base)


def test_dashboard_tab_shows_welcome_and_seeded_stats():
    html = render_tab(_view())
    assert "Welcome back, A B!" in html
    assert "1,248" in html
    assert "84" in html
    assert "42" in html
    assert "92.5%" in html
    assert "No announcements available" in html


def test_dashboard_tab_uses_live_course_count():
    html = render_tab(_view(stats=DisplayStats(active_courses=7)))
    assert '<p class="stat-tile__value">7</p>' in html
    assert '<p class="stat-tile__value">42</p>' not in html


def test_announcement_items_escape_and_truncate():
    ann = Announcement(
        id="a1",
        title="<b>Exam</b>",
        content="y" * 140,
        target_audience="all",
        priority="urgent",
        is_published=True,
        publish_date="2024-03-01T09:30:00Z",
    )
    html = render_tab(_view(announcements=(ann,)))
    assert "&lt;b&gt;Exam&lt;/b&gt;" in html
    assert "<b>Exam</b>" not in html
    assert ("y" * 100 + "...") in html
    assert "y" * 101 not in html
    assert "announcement--urgent" in html
    assert "2024-03-01" in html


def test_courses_tab_renders_cards_and_fallback_description():
    course = Course(
        id="c1",
        course_code="PHY201",
        name="Physics",
        credits=4,
        grade_level="11th",
        department="Science",
        is_active=True,
    )
    html = render_tab(_view("courses", courses=(course,)))
    assert "Physics" in html
    assert "Code: PHY201" in html
    assert "No description available" in html
    assert "Credits: 4" in html
    assert "Active" in html


def test_courses_tab_empty_state():
    html = render_tab(_view("courses"))
    assert "No courses available" in html


def test_people_tabs_render_sample_rosters():
    assert "Emma Johnson" in render_tab(_view("students"))
    assert "Dr. Amanda Rodriguez" in render_tab(_view("teachers"))


def test_placeholder_tabs_are_coming_soon():
    for tab in ("attendance", "calendar", "reports", "settings"):
        assert "Coming Soon" in render_tab(_view(tab))


def test_navigation_marks_exactly_one_active_link():
    html = Navigation("courses").render()
    assert html.count('aria-current="page"') == 1
    assert 'data-tab="courses"' in html
    assert 'hx-get="/dashboard?tab=courses"' in html


def test_layout_fragment_carries_out_of_band_sidebar():
    layout = Layout(title="Courses", content="<p>body</p>", active_tab="courses")
    fragment = layout.render_fragment()
    assert fragment.startswith("<p>body</p>")
    assert 'hx-swap-oob="true"' in fragment
    assert "<html" not in fragment


def test_layout_full_page_has_header_with_profile():
    profile = Profile(id="u1", email="a@b.com", full_name="zoe Z", role="student")
    html = Layout(title="Dashboard", content="", profile=profile).render()
    assert "<title>Dashboard - EduManage Pro</title>" in html
    assert 'class="user-avatar" aria-hidden="true">Z<' in html
    assert "(student)" in html
    assert 'action="/auth/logout"' in html


def test_auth_form_never_echoes_password_and_shows_error():
    html = AuthForm("sign_in", error="Invalid email or password.", values={"email": "a@b.com", "password": "pw"}).render()
    assert 'value="a@b.com"' in html
    assert 'value="pw"' not in html
    assert 'role="alert"' in html
    assert 'href="/auth/register"' in html


def test_sign_up_form_has_name_and_role_fields():
    html = AuthForm("sign_up", values={"role": "teacher"}).render()
    assert 'name="full_name"' in html
    assert 'name="role"' in html
    for role in ("student", "teacher", "parent", "admin"):
        assert f'value="{role}"' in html
    assert 'action="/auth/register"' in html


def test_publish_date_formatting_tolerates_garbage():
    assert format_publish_date("2024-02-01T00:00:00+00:00") == "2024-02-01"
    assert format_publish_date("soon") == "soon"
    assert format_publish_date("") == ""


def test_loading_page_polls_the_page_it_stands_in_for():
    html = LoadingPage(poll_url="/dashboard?tab=reports&x=1").render()
    assert 'role="status"' in html
    assert 'id="session-pending"' in html
    assert 'hx-get="/dashboard?tab=reports&amp;x=1"' in html
    assert 'hx-trigger="every 1s"' in html
    assert 'hx-swap="none"' in html
