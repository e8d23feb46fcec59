import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .core.config import Settings, get_settings
from .core.errors import MovieStoreError, movie_store_error_handler
from .core.logging_config import setup_logging
from .movies.router import build_movie_router
from .movies.service import MovieService
from .movies.store import MovieStore, build_movie_store

logger = logging.getLogger(__name__)

def create_app(settings: Optional[Settings] = None, store: Optional[MovieStore] = None) -> FastAPI:
    settings = settings or get_settings()
    setup_logging(settings)

    if store is None:
        store = build_movie_store(settings)
    logger.info(f"Starting {settings.APP_NAME} with {type(store).__name__}")

    app = FastAPI(title=settings.APP_NAME)

    @app.get("/")
    def read_root():
        return {"message": f"Welcome to the {settings.APP_NAME} Movie API"}

    movie_service = MovieService(store)
    app.include_router(build_movie_router(movie_service, settings), prefix=settings.API_PREFIX)
    app.add_exception_handler(MovieStoreError, movie_store_error_handler)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["Location", f"X-{settings.APP_NAME}-alert",
                        f"X-{settings.APP_NAME}-error", f"X-{settings.APP_NAME}-params"],
    )

    return app

app = create_app()
