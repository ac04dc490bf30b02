"""
Layout component for EduManage.

Main wrapper that combines header, sidebar and content into a complete page.
"""

from typing import Optional

from backend.identity_access.domain import Profile

from .base import Component
from .navigation import AppHeader, Navigation


class Layout(Component):
    """Assemble the complete page, or only the main fragment for HTMX swaps."""

    def __init__(
        self,
        title: str,
        content: str,
        profile: Optional[Profile] = None,
        show_nav: bool = True,
        active_tab: str = "dashboard",
    ):
        """
        Args:
            title: Page title (will be escaped)
            content: Main content HTML (pre-rendered components)
            profile: Signed-in profile for the header (None while pending)
            show_nav: Whether to show header and sidebar (False on auth pages)
            active_tab: Tab to highlight in the sidebar
        """
        self.title = title
        self.content = content
        self.profile = profile
        self.show_nav = show_nav
        self.active_tab = active_tab

    def render(self) -> str:
        header_html = AppHeader(self.profile).render() if self.show_nav else ""
        nav_html = Navigation(self.active_tab).render() if self.show_nav else ""
        shell_class = "app-shell" if self.show_nav else "app-shell app-shell--public"
        return f"""<!DOCTYPE html>
<html lang="en">
<head>
    {self._render_head()}
</head>
<body>
    <a href="#main-content" class="skip-link">Skip to main content</a>
    {header_html}
    <div class="{shell_class}">
        {nav_html}
        <main id="main-content" class="main-content" role="main">
            {self.content}
        </main>
    </div>
</body>
</html>"""

    def render_fragment(self) -> str:
        """Return the HTMX fragment: main content plus an out-of-band sidebar.

        HTMX swaps replace the innerHTML of `#main-content`; the sidebar is
        refreshed out-of-band so the active tab highlight follows.
        """
        if not self.show_nav:
            return self.content
        sidebar_oob = Navigation(self.active_tab).render_aside(oob=True)
        return f"{self.content}{sidebar_oob}"

    def _render_head(self) -> str:
        return f"""
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <meta name="description" content="EduManage Pro - school administration dashboard">
    <meta http-equiv="X-Content-Type-Options" content="nosniff">

    <title>{self.escape(self.title)} - EduManage Pro</title>

    <link rel="stylesheet" href="/static/css/edumanage.css?v=1">
    <script src="https://unpkg.com/htmx.org@1.9.12" crossorigin="anonymous"></script>
    """
