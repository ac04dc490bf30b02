"""
Navigation components for EduManage.

Sidebar with one entry per dashboard tab and the top header showing the
signed-in profile. Tab links use HTMX so switching tabs only swaps the main
content column; without JavaScript they degrade to normal links.
"""

from typing import List, Optional, Tuple

from backend.identity_access.domain import Profile

from .base import Component

NAV_ITEMS: List[Tuple[str, str, str]] = [
    ("dashboard", "Dashboard", "📊"),
    ("students", "Students", "👥"),
    ("teachers", "Teachers", "🎓"),
    ("courses", "Courses", "📚"),
    ("attendance", "Attendance", "📋"),
    ("calendar", "Calendar", "📅"),
    ("reports", "Reports", "📈"),
    ("settings", "Settings", "⚙️"),
]


def tab_href(tab: str) -> str:
    return f"/dashboard?tab={tab}"


class Navigation(Component):
    """Sidebar listing all tabs, highlighting the active one."""

    def __init__(self, active_tab: str = "dashboard"):
        self.active_tab = active_tab

    def render(self) -> str:
        return self.render_aside()

    def render_aside(self, oob: bool = False) -> str:
        """Render the sidebar <aside>.

        Args:
            oob: If True, adds hx-swap-oob="true" so HTMX fragment responses
                update the active highlight out-of-band.
        """
        oob_attr = ' hx-swap-oob="true"' if oob else ""
        links = "".join(self._render_link(tab, label, icon) for tab, label, icon in NAV_ITEMS)
        return f"""
    <aside class="sidebar" id="sidebar" aria-label="Sidebar"{oob_attr}>
        <nav class="sidebar-nav" role="navigation" aria-label="Main navigation">
            {links}
        </nav>
    </aside>"""

    def _render_link(self, tab: str, label: str, icon: str) -> str:
        is_active = tab == self.active_tab
        href = tab_href(tab)
        attrs = self.attributes(
            href=href,
            hx_get=href,
            hx_target="#main-content",
            hx_push_url="true",
            class_=self.classes("sidebar-link", active=is_active),
            aria_current="page" if is_active else None,
            data_tab=tab,
        )
        return (
            f"<a {attrs}>"
            f'<span class="nav-icon" aria-hidden="true">{icon}</span>'
            f'<span class="nav-text">{self.escape(label)}</span>'
            "</a>"
        )


class AppHeader(Component):
    """Top bar: product name, profile initial, name, role and sign-out."""

    def __init__(self, profile: Optional[Profile] = None):
        self.profile = profile

    def render(self) -> str:
        # Profile may still be pending right after sign-in.
        initial = self.profile.initial if self.profile else "U"
        name = self.profile.full_name if self.profile else ""
        role_html = (
            f'<span class="user-role">({self.escape(self.profile.role)})</span>' if self.profile else ""
        )
        return f"""
    <header class="app-header" role="banner">
        <div class="app-brand">
            <span class="app-logo" aria-hidden="true">🎓</span>
            <span class="app-title">EduManage Pro</span>
        </div>
        <div class="app-user">
            <button class="notifications" type="button" aria-label="Notifications">🔔</button>
            <span class="user-avatar" aria-hidden="true">{self.escape(initial)}</span>
            <span class="user-name">{self.escape(name)}</span>
            {role_html}
            <form method="post" action="/auth/logout" class="logout-form">
                <button type="submit" class="logout-button" title="Sign Out" aria-label="Sign Out">⎋</button>
            </form>
        </div>
    </header>"""


__all__ = ["AppHeader", "NAV_ITEMS", "Navigation", "tab_href"]
