"""
Response helpers shared by the route modules.

Keeps the HTMX rules (fragment vs. full page, `HX-Redirect`) and the cache
policy for personalised pages in one place.
"""
from __future__ import annotations

from fastapi import Request
from fastapi.responses import HTMLResponse, Response

from backend.web.components import Layout
from backend.web.context import DashboardContext


def get_dashboard(request: Request) -> DashboardContext:
    """Return the DashboardContext the session middleware attached."""
    return request.state.dashboard


def layout_response(
    request: Request,
    layout: Layout,
    *,
    status_code: int = 200,
    headers: dict[str, str] | None = None,
) -> HTMLResponse:
    """Render Layout with HTMX-aware semantics and return an HTMLResponse.

    Behavior:
        - HTMX requests (`HX-Request` header) receive only the main fragment
          plus the out-of-band sidebar.
        - Otherwise the complete document is rendered.
        - Pages default to `Cache-Control: private, no-store`; callers may
          override headers.
    """
    if request.headers.get("HX-Request"):
        body = layout.render_fragment()
    else:
        body = layout.render()
    response = HTMLResponse(content=body, status_code=status_code)
    response.headers["Vary"] = "HX-Request"
    response.headers["Cache-Control"] = "private, no-store"
    if headers:
        for key, value in headers.items():
            response.headers[key] = value
    return response


def redirect(request: Request, location: str, *, unauthorized: bool = False) -> Response:
    """Redirect that also works for HTMX requests (via `HX-Redirect`)."""
    if request.headers.get("HX-Request"):
        return Response(
            status_code=401 if unauthorized else 200,
            headers={"HX-Redirect": location, "Cache-Control": "private, no-store", "Vary": "HX-Request"},
        )
    return Response(status_code=303, headers={"Location": location, "Cache-Control": "private, no-store"})


__all__ = ["get_dashboard", "layout_response", "redirect"]
