"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from rxart import __version__
from rxart.config import settings

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.rxart_log_level.upper(), logging.INFO),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)


def create_app() -> FastAPI:
    app = FastAPI(
        title="rxart",
        description="Deterministic prescription artwork from question text to layered SVG",
        version=__version__,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from rxart.api.router import api_router

    app.include_router(api_router)

    return app


app = create_app()
