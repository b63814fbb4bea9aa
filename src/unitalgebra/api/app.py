from __future__ import annotations

import logging

from fastapi import FastAPI

from unitalgebra.api.routes_units import router as units_router
from unitalgebra.config import load_settings
from unitalgebra.observability import configure_logging

logger = logging.getLogger(__name__)

settings = load_settings()
configure_logging(settings.log_level)

app = FastAPI(title="unit-algebra", version=settings.engine_version)
app.include_router(units_router)


@app.get("/health")
def health() -> dict:
    return {"status": "ok", "version": settings.engine_version}


__all__ = ["app"]
