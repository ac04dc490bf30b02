"""
Authentication routes: the sign-in / sign-up form collaborator.

Why:
    The Session Manager raises `AuthError` on rejected credentials; this
    module turns that into a re-rendered form with a visible message so no
    auth failure ever surfaces as a server error.

Notes:
    - The password is never echoed back into the form or logged.
    - Sign-out is idempotent and always lands on the login page.
"""

from __future__ import annotations

import logging
from typing import Mapping, Optional

from fastapi import APIRouter, Request
from fastapi.responses import Response

from backend.identity_access.domain import AuthError
from backend.web.components import AuthForm, Layout
from backend.web.responses import get_dashboard, layout_response, redirect

auth_router = APIRouter(tags=["Auth"])
logger = logging.getLogger("edumanage.web.auth")


def _form_page(
    request: Request,
    mode: str,
    *,
    error: Optional[str] = None,
    values: Optional[Mapping[str, str]] = None,
    status_code: int = 200,
) -> Response:
    title = "Sign Up" if mode == "sign_up" else "Sign In"
    form = AuthForm(mode, error=error, values=values)
    layout = Layout(title=title, content=form.render(), show_nav=False)
    return layout_response(request, layout, status_code=status_code)


def _field(form: Mapping[str, object], name: str) -> str:
    value = form.get(name)
    return value if isinstance(value, str) else ""


@auth_router.get("/auth/login")
async def auth_login_page(request: Request):
    ctx = get_dashboard(request)
    if ctx.session.is_authenticated:
        return redirect(request, "/dashboard")
    return _form_page(request, "sign_in")


@auth_router.post("/auth/login")
async def auth_login(request: Request):
    """Sign in with email/password; on rejection re-render the form (400)."""
    ctx = get_dashboard(request)
    form = await request.form()
    email = _field(form, "email")
    password = _field(form, "password")
    try:
        await ctx.session.sign_in(email, password)
    except AuthError as err:
        if err.code == "already_signed_in":
            return redirect(request, "/dashboard")
        logger.info("Sign-in failed: %s", err.code)
        return _form_page(request, "sign_in", error=err.message, values={"email": email}, status_code=400)
    return redirect(request, "/dashboard")


@auth_router.get("/auth/register")
async def auth_register_page(request: Request):
    ctx = get_dashboard(request)
    if ctx.session.is_authenticated:
        return redirect(request, "/dashboard")
    return _form_page(request, "sign_up")


@auth_router.post("/auth/register")
async def auth_register(request: Request):
    """Create an account plus profile; on rejection re-render the form (400)."""
    ctx = get_dashboard(request)
    form = await request.form()
    values = {
        "email": _field(form, "email"),
        "full_name": _field(form, "full_name"),
        "role": _field(form, "role") or "student",
    }
    try:
        await ctx.session.sign_up(values["email"], _field(form, "password"), values["full_name"], values["role"])
    except AuthError as err:
        if err.code == "already_signed_in":
            return redirect(request, "/dashboard")
        logger.info("Sign-up failed: %s", err.code)
        return _form_page(request, "sign_up", error=err.message, values=values, status_code=400)
    return redirect(request, "/dashboard")


@auth_router.post("/auth/logout")
@auth_router.get("/auth/logout")
async def auth_logout(request: Request):
    ctx = get_dashboard(request)
    await ctx.session.sign_out()
    return redirect(request, "/auth/login")
