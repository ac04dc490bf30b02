"""Small full-page states: loading spinner and not-found."""

from ..base import Component

# htmx sends this id as `HX-Trigger` on every poll from the loading page.
SESSION_POLL_ID = "session-pending"


class LoadingPage(Component):
    """Shown while the initial session check is unresolved.

    Polls `poll_url` every second; once the check resolves the server answers
    the poll with `HX-Redirect` and the browser reloads the real page.
    """

    def __init__(self, poll_url: str = "/dashboard"):
        self.poll_url = poll_url

    def render(self) -> str:
        poll_attrs = self.attributes(id=SESSION_POLL_ID, hx_get=self.poll_url, hx_trigger="every 1s", hx_swap="none")
        return (
            '<div class="loading-page" role="status" aria-live="polite">'
            '<div class="spinner" aria-hidden="true"></div>'
            '<p class="text-muted">Loading...</p>'
            f"<div {poll_attrs}></div>"
            "</div>"
        )


class NotFoundPage(Component):
    def __init__(self, message: str = "The requested page does not exist."):
        self.message = message

    def render(self) -> str:
        return (
            '<div class="empty-state">'
            "<h2>Not Found</h2>"
            f"<p>{self.escape(self.message)}</p>"
            '<p><a href="/dashboard">Back to dashboard</a></p>'
            "</div>"
        )
