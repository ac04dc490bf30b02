"""
Session-cookie name and flags.

The cookie carries only the opaque id of the browser's dashboard context;
sign-out keeps the id and resets the context's session state instead of
clearing the cookie.
"""

from __future__ import annotations

SESSION_COOKIE_NAME = "edumanage_session"


def cookie_opts(prod_like: bool) -> dict:
    """Return cookie flags for the session cookie.

    Returns a mapping with keys:
      - httponly: True
      - secure: True in production-like environments (local dev runs on http)
      - samesite: "lax"  # form posts and top-level navigations keep the cookie
      - path: "/"
    """
    return {"httponly": True, "secure": bool(prod_like), "samesite": "lax", "path": "/"}
