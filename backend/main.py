"""FastAPI application entrypoint."""

import logging

from fastapi import FastAPI
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from config import LOG_LEVEL, validate_config
from routers import certificates, check_ins, locations, progress
from routers.rate_limit import limiter


logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

validate_config()

app = FastAPI(
    title="Landmark Quest API",
    description="Landmarks, missions, check-ins and completion certificates.",
    version="1.0.0",
)

app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

app.include_router(locations.router, prefix="/api/v1/locations", tags=["locations"])
app.include_router(check_ins.router, prefix="/api/v1/check-ins", tags=["check-ins"])
app.include_router(progress.router, prefix="/api/v1/progress", tags=["progress"])
app.include_router(certificates.router, prefix="/api/v1/certificates", tags=["certificates"])


@app.get("/health")
def health_check():
    return {"status": "ok"}
