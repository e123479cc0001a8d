"""Cabinet Dimensions — FastAPI application entry point."""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from cabinet_dims.config import settings
from cabinet_dims.api.routes_dimensions import router as dimensions_router
from cabinet_dims.api.routes_preferences import router as preferences_router

app = FastAPI(
    title=settings.app_name,
    version="0.1.0",
    description="Parse, convert and format cabinet dimensions in inches and millimeters.",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(dimensions_router, prefix="/api")
app.include_router(preferences_router, prefix="/api")


@app.get("/api/health")
async def health():
    return {"status": "ok", "version": "0.1.0"}
