# -*- coding: utf-8 -*-
"""
Daily Diet API

Session-cookie user registration, meal CRUD and on-diet metrics.
"""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .app_db import init_app_db
from .config import settings
from .meals.api import router as meals_router
from .users.api import router as users_router

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Daily Diet API",
    description="Register with a session cookie, log meals and track on-diet streaks",
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.on_event("startup")
def _startup_init_db() -> None:
    init_app_db(settings.db_path)


# Ensure the app DB exists even when lifespan events are not triggered (e.g. some test clients).
init_app_db(settings.db_path)


@app.exception_handler(RequestValidationError)
async def _validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    # Malformed bodies and path ids are client input errors: 400, not 422.
    logger.info("Validation failed: %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=400,
        content={"message": "Validation error", "issues": jsonable_encoder(exc.errors())},
    )


app.include_router(users_router)
app.include_router(meals_router)


@app.get("/health")
def health() -> dict:
    return {"ok": True}


def run(host: Optional[str] = None, port: Optional[int] = None) -> None:
    """Console entry point (used by pyproject [project.scripts])."""
    import uvicorn

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run("dailydiet.api:app", host=host or settings.host, port=port or settings.port, reload=False)
