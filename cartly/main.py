# cartly/main.py
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from cartly.api.routers import carts, catalog, health, session as session_router
from cartly.session import Session
from cartly.utils.logging import get_logger

logger = get_logger(__name__)


def create_app(session: Session | None = None) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        current = session or Session()
        app.state.session = current.start()
        try:
            yield
        finally:
            current.close()

    app = FastAPI(
        title="Cartly Storefront State",
        version="1.0.0",
        lifespan=lifespan,
    )

    # Include routers
    app.include_router(health.router)
    app.include_router(catalog.router)
    app.include_router(carts.router)
    app.include_router(session_router.router)

    return app


app = create_app()

if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=8000)
