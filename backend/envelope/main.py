from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from envelope.config import settings
from envelope.api.routes import router

VERSION = "1.0.0"

logging.basicConfig(level=settings.log_level.upper())

app = FastAPI(
    title="Buildable Envelope Engine",
    description=(
        "Compute the buildable envelope of a rectangular lot from its "
        "dimensions, setbacks and height limit, with footprint, volume "
        "and estimated unit yield."
    ),
    version=VERSION,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(router)


@app.get("/")
async def root():
    return {
        "name": "Buildable Envelope Engine",
        "version": VERSION,
        "endpoints": {
            "api_docs": "/docs",
            "health": "/health",
            "defaults": "GET /api/defaults",
            "bounds": "GET /api/bounds",
            "envelope": "POST /api/envelope",
            "envelope_query": "GET /api/envelope?lot_width=...",
        },
    }


@app.get("/health")
async def health():
    return {"status": "healthy", "version": VERSION}
