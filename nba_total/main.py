# nba_total/main.py
from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
import logging
import time

from nba_total.core.config import (
    get_cors_origins,
    get_http_timeout,
    get_log_level,
    get_max_tries,
    get_scoreboard_url,
)
from nba_total.models.clock import REGULATION_MINUTES

# ------------ Router imports ------------
from nba_total.routers import calculator_routes, live_routes

# ------------ Logging ------------
logging.basicConfig(level=get_log_level())
logger = logging.getLogger("nba_total")

# ------------ App ------------
app = FastAPI(
    title="NBA Total Calculator API",
    version="1.0.0",
    docs_url="/docs",
    redoc_url=None,
    openapi_url="/openapi.json",
)


# ------------ Access log middleware ------------
class AccessLogMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request, call_next):
        t0 = time.perf_counter()
        status = 500
        try:
            response = await call_next(request)
            status = response.status_code
        finally:
            dt = (time.perf_counter() - t0) * 1000
            logger.info(
                "ACCESS %s %s q=%s -> %s in %.1fms",
                request.method,
                request.url.path,
                request.url.query,
                status,
                dt,
            )
        return response


app.add_middleware(AccessLogMiddleware)

# ------------ CORS ------------
_origins = get_cors_origins()
app.add_middleware(
    CORSMiddleware,
    allow_origins=_origins,
    # browsers refuse credentials with a wildcard origin
    allow_credentials=_origins != ["*"],
    allow_methods=["GET"],
    allow_headers=["*"],
)


# ------------ Global error handler ------------
@app.exception_handler(Exception)
async def _unhandled(request: Request, exc: Exception):
    logger.exception("UNHANDLED ERROR: %s %s", request.method, request.url)
    return JSONResponse(status_code=500, content={"error": "internal_error"})


# ------------ Health & status ------------
@app.get("/health")
async def health():
    return {"ok": True}


@app.get("/status")
async def status():
    return {
        "ok": True,
        "regulationMinutes": REGULATION_MINUTES,
        "scoreboardUrl": get_scoreboard_url(),
        "httpTimeoutSec": get_http_timeout(),
        "httpMaxTries": get_max_tries(),
        "corsOrigins": _origins,
    }


# ------------ Mount routers ------------
app.include_router(calculator_routes.router, prefix="/api/nba")
app.include_router(live_routes.router, prefix="/api/nba")
