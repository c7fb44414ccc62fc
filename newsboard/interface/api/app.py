"""FastAPI application."""

from contextlib import asynccontextmanager

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from newsboard.config import Settings
from newsboard.interface.api.routes import auth, comments, health, posts
from newsboard.interface.error import register_error_handlers
from newsboard.util.di.container import create_container, setup_di
from newsboard.util.observability import instrument_fastapi


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    # Runs the container's finalizers (engine disposal)
    await app.state.dishka_container.close()


def create_app(
    settings: Settings | None = None, container: AsyncContainer | None = None
) -> FastAPI:
    """Create FastAPI application.

    Logfire should be configured before calling this function:
    start_app.py does it in production, conftest.py in tests.

    Args:
        settings: Application settings (loaded from the environment if omitted)
        container: DI container built over the same settings
            (production container if omitted)
    """
    settings = settings or Settings()

    app_instance = FastAPI(
        title="Newsboard API",
        description="Link aggregation API: posts, threaded comments and upvotes",
        version="0.1.0",
        lifespan=lifespan,
    )

    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.api.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type", "Accept", "Origin", "X-Requested-With"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    setup_di(app_instance, container or create_container(settings))

    register_error_handlers(app_instance, settings)

    app_instance.include_router(health.router)
    app_instance.include_router(auth.router, prefix=settings.api.prefix)
    app_instance.include_router(posts.router, prefix=settings.api.prefix)
    app_instance.include_router(comments.router, prefix=settings.api.prefix)

    return app_instance
