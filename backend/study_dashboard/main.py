# study_dashboard/main.py
from fastapi import FastAPI

from study_dashboard.core.config import settings
from study_dashboard.core.logging_config import configure_logging
from study_dashboard.middleware.cors import StudyStatusCORSMiddleware
from study_dashboard.middleware.request_logging import RequestLoggingMiddleware
from study_dashboard.routers.health import router as health_router
from study_dashboard.routers.root import router as root_router
from study_dashboard.routers.study_status import router as study_status_router
from study_dashboard.core.exception_handlers import (
    app_error_handler,
    unhandled_exception_handler,
)
from study_dashboard.core import AppError

configure_logging()


def create_app() -> FastAPI:
    app = FastAPI(title=settings.app_name)

    app.add_middleware(RequestLoggingMiddleware)

    # ---- CORS (env-driven) ----
    # CORS_ALLOW_ORIGINS="*" (default) lets the dashboard be served from anywhere.
    allow_origins = settings.cors_origins

    app.add_middleware(
        StudyStatusCORSMiddleware,
        allow_origins=allow_origins,
        # Wildcard origins cannot be combined with credentials
        allow_credentials="*" not in allow_origins,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["x-request-id"],
    )

    # Exception handlers
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    # Routers
    app.include_router(root_router)
    app.include_router(health_router)
    app.include_router(study_status_router)

    return app


app = create_app()
