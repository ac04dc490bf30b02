"EduManage Pro"
from __future__ import annotations

from contextlib import asynccontextmanager
from pathlib import Path
import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from dotenv import load_dotenv

from backend.web.auth_utils import SESSION_COOKIE_NAME, cookie_opts
from backend.web.config import load_settings, should_load_dotenv
from backend.web.context import AppContext, supabase_context_factory
from backend.web.routes.auth import auth_router
from backend.web.routes.dashboard import dashboard_router

if should_load_dotenv():
    load_dotenv()

logger = logging.getLogger("edumanage.web")

STATIC_DIR = Path(__file__).parent / "static"


@asynccontextmanager
async def _lifespan(app: FastAPI):
    """Build the AppContext at startup (unless injected) and close it at shutdown.

    A missing SUPABASE_URL / SUPABASE_ANON_KEY raises ConfigError here, which
    aborts startup before any request is served.
    """
    if getattr(app.state, "context", None) is None:
        settings = load_settings()
        logging.getLogger("edumanage").setLevel(settings.log_level)
        app.state.context = AppContext(supabase_context_factory(settings), settings=settings)
        logger.info("EduManage started (env=%s)", settings.environment)
    try:
        yield
    finally:
        await app.state.context.close()


def _is_public_path(path: str) -> bool:
    return path.startswith("/static/") or path in ("/health", "/favicon.ico")


def create_app(context: Optional[AppContext] = None) -> FastAPI:
    """Create the ASGI app.

    Parameters:
        context: Pre-built AppContext (tests inject fakes here). When omitted,
            the lifespan handler builds one from the environment.
    """
    app = FastAPI(
        title="EduManage Pro",
        description="School administration dashboard",
        version="0.1.0",
        lifespan=_lifespan,
    )
    app.state.context = context
    app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")
    app.include_router(auth_router)
    app.include_router(dashboard_router)

    @app.middleware("http")
    async def dashboard_session(request: Request, call_next):
        """Attach the browser's DashboardContext to `request.state.dashboard`.

        Unknown or expired cookies get a fresh context whose initial session
        check is started (and usually resolved); known ones are reconciled
        with the provider (stored sessions, expiry) before the route runs,
        unless their initial check is still pending.
        """
        if _is_public_path(request.url.path):
            return await call_next(request)
        app_ctx: AppContext = request.app.state.context
        await app_ctx.purge_expired()
        rec = app_ctx.lookup(request.cookies.get(SESSION_COOKIE_NAME))
        issued: Optional[str] = None
        if rec is None:
            rec = await app_ctx.open_session()
            issued = rec.session_id
        elif not rec.context.session.loading:
            await rec.context.session.refresh()
        request.state.dashboard = rec.context
        request.state.session_id = rec.session_id
        response = await call_next(request)
        if issued:
            response.set_cookie(key=SESSION_COOKIE_NAME, value=issued, **cookie_opts(app_ctx.prod_like))
        return response

    @app.get("/health")
    async def health() -> JSONResponse:
        return JSONResponse({"status": "healthy"})

    return app


app = create_app()
