"""
Dashboard routes: tab navigation over the data the View Controller holds.

Rendering never queries the backend; switching tabs only changes
`active_tab`. Anonymous visitors are sent to the login page.
"""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Request

from backend.web.components import Layout, LoadingPage, NotFoundPage, render_tab
from backend.web.components.pages import SESSION_POLL_ID
from backend.web.responses import get_dashboard, layout_response, redirect

dashboard_router = APIRouter(tags=["Dashboard"])
logger = logging.getLogger("edumanage.web.dashboard")

_TAB_TITLES = {
    "dashboard": "Dashboard",
    "students": "Students",
    "teachers": "Teachers",
    "courses": "Courses",
    "attendance": "Attendance",
    "calendar": "Calendar",
    "reports": "Reports",
    "settings": "Settings",
}


@dashboard_router.get("/")
async def index(request: Request):
    return redirect(request, "/dashboard")


@dashboard_router.get("/dashboard")
async def dashboard(request: Request, tab: Optional[str] = None):
    """Render the active tab; `?tab=<id>` switches tabs first.

    Behavior:
        - 200 loading page while the initial session check is unresolved; its
          poll gets `HX-Redirect` back to this URL once the check resolves.
        - 303 to /auth/login (HTMX: 401 + HX-Redirect) without a signed-in user.
        - 404 for tab ids outside the navigation.
    """
    ctx = get_dashboard(request)
    here = request.url.path + (f"?{request.url.query}" if request.url.query else "")
    if ctx.session.loading:
        page = LoadingPage(poll_url=here)
        return layout_response(request, Layout(title="Loading", content=page.render(), show_nav=False))
    if request.headers.get("HX-Trigger") == SESSION_POLL_ID:
        return redirect(request, here)
    if not ctx.session.is_authenticated:
        return redirect(request, "/auth/login", unauthorized=True)
    if tab is not None:
        try:
            ctx.controller.set_active_tab(tab)
        except ValueError:
            logger.debug("Unknown tab requested: %s", tab)
            view = ctx.view()
            layout = Layout(
                title="Not Found",
                content=NotFoundPage(f"Unknown section: {tab}").render(),
                profile=view.profile,
                active_tab=view.active_tab,
            )
            return layout_response(request, layout, status_code=404)
    view = ctx.view()
    layout = Layout(
        title=_TAB_TITLES[view.active_tab],
        content=render_tab(view),
        profile=view.profile,
        active_tab=view.active_tab,
    )
    return layout_response(request, layout)
