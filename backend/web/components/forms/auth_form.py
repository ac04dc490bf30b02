"""
Sign-in / sign-up form.

The form posts to /auth/login or /auth/register. On rejection the route
re-renders it with `error` set and the previously entered values (except the
password) so the user can correct them.
"""

from typing import Mapping, Optional

from ..base import Component
from .fields import SelectField, TextInputField

ROLE_OPTIONS = (
    ("student", "Student"),
    ("teacher", "Teacher"),
    ("parent", "Parent"),
    ("admin", "Administrator"),
)


class AuthForm(Component):
    def __init__(self, mode: str = "sign_in", *, error: Optional[str] = None, values: Optional[Mapping[str, str]] = None):
        if mode not in ("sign_in", "sign_up"):
            raise ValueError("invalid mode")
        self.mode = mode
        self.error = error
        self.values = dict(values or {})

    @property
    def is_sign_up(self) -> bool:
        return self.mode == "sign_up"

    def render(self) -> str:
        action = "/auth/register" if self.is_sign_up else "/auth/login"
        heading = "Create your account" if self.is_sign_up else "Welcome back"
        submit = "Sign Up" if self.is_sign_up else "Sign In"
        error_html = (
            f'<div class="alert alert-error" role="alert">{self.escape(self.error)}</div>' if self.error else ""
        )
        return f"""
<section class="auth-card" aria-labelledby="auth-heading">
    <div class="auth-card__brand" aria-hidden="true">🎓</div>
    <h1 id="auth-heading" class="auth-card__title">{heading}</h1>
    <p class="auth-card__subtitle">EduManage Pro school administration</p>
    {error_html}
    <form method="post" action="{action}" class="auth-form">
        {self._fields()}
        <button type="submit" class="btn btn-primary auth-form__submit">{submit}</button>
    </form>
    {self._toggle()}
</section>"""

    def _fields(self) -> str:
        parts = []
        if self.is_sign_up:
            parts.append(
                TextInputField("full_name", "Full Name", required=True).render(
                    value=self.values.get("full_name", ""), autocomplete="name"
                )
            )
        parts.append(
            TextInputField("email", "Email", required=True).render(
                value=self.values.get("email", ""), input_type="email", autocomplete="email"
            )
        )
        parts.append(
            TextInputField("password", "Password", required=True, invalid=bool(self.error)).render(
                input_type="password",
                autocomplete="new-password" if self.is_sign_up else "current-password",
            )
        )
        if self.is_sign_up:
            parts.append(
                SelectField("role", "Role", required=True).render(
                    options=ROLE_OPTIONS, selected=self.values.get("role", "student")
                )
            )
        return "".join(parts)

    def _toggle(self) -> str:
        if self.is_sign_up:
            return '<p class="auth-card__toggle">Already have an account? <a href="/auth/login">Sign in</a></p>'
        return '<p class="auth-card__toggle">Don\'t have an account? <a href="/auth/register">Sign up</a></p>'
