"""Main FastAPI application for the Sudoku game."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.routes import _check_game_config, _get_settings, router

logging.basicConfig(
    level=_get_settings().log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)


@asynccontextmanager
async def _app_lifespan(_: FastAPI):
    """Validate the difficulty table so misconfiguration fails at startup."""
    error = _check_game_config()
    if error:
        raise RuntimeError(f"Invalid difficulty configuration at startup: {error}")
    yield


app = FastAPI(
    title="Sudoku Game API",
    description="API for generating Sudoku puzzles and playing them",
    version="1.0.0",
    lifespan=_app_lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(router)


@app.get("/")
async def root():
    """Root endpoint."""
    return {"message": "Sudoku Game API", "docs": "/docs"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("backend.main:app", host="0.0.0.0", port=8000, reload=True)
