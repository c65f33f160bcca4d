# garage/main.py
"""
FastAPI application entry point.
Includes security middleware, global error handlers, and all routers.
"""

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import BaseHTTPMiddleware
from garage.routers import facility, clients, parking, occupancy, health
from garage.state import build_facility
from garage.config import settings
from garage.utils.logger import get_logger
import time

logger = get_logger(__name__)

app = FastAPI(
    title="Garage Parking Management API",
    description="Multi-floor slot allocation, client directory and tiered exit fees. In-memory.",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

app.state.facility = build_facility()

# ── CORS (allow an operator dashboard on the same LAN to call the API) ──────
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],   # Restrict to dashboard IP in production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ── API Key Middleware ───────────────────────────────────────────────────────
class APIKeyMiddleware(BaseHTTPMiddleware):
    """
    Optional lightweight API key auth.
    Health check and docs stay open. Set API_KEY in .env; leave empty to disable auth.
    """
    async def dispatch(self, request: Request, call_next):
        open_paths = {"/api/v1/health", "/docs", "/redoc", "/openapi.json"}
        if request.url.path in open_paths or not settings.API_KEY:
            return await call_next(request)

        api_key = request.headers.get("X-API-Key") or request.query_params.get("api_key")
        if api_key != settings.API_KEY:
            return JSONResponse(
                status_code=status.HTTP_401_UNAUTHORIZED,
                content={"detail": "Invalid or missing API key"},
            )
        return await call_next(request)


app.add_middleware(APIKeyMiddleware)


# ── Request Timing Middleware ────────────────────────────────────────────────
@app.middleware("http")
async def log_requests(request: Request, call_next):
    start = time.time()
    response = await call_next(request)
    duration = round((time.time() - start) * 1000, 2)
    logger.debug(f"{request.method} {request.url.path} → {response.status_code} ({duration}ms)")
    return response


# ── Global Exception Handler ─────────────────────────────────────────────────
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled exception on {request.url.path}: {exc}", exc_info=True)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


# ── Routers ──────────────────────────────────────────────────────────────────
app.include_router(facility.router,  prefix="/api/v1", tags=["🏢 Facility"])
app.include_router(clients.router,   prefix="/api/v1", tags=["👤 Clients"])
app.include_router(parking.router,   prefix="/api/v1", tags=["🚗 Entry/Exit"])
app.include_router(occupancy.router, prefix="/api/v1", tags=["🅿️  Occupancy"])
app.include_router(health.router,    prefix="/api/v1", tags=["💚 Health"])


# ── Startup ───────────────────────────────────────────────────────────────────
@app.on_event("startup")
async def startup():
    logger.info("🚀 Garage backend starting up...")
    fac = app.state.facility
    if fac.is_configured:
        logger.info(f"🏢 Facility ready: {fac.floor_count} floors × {fac.slots_per_floor} slots")
    else:
        logger.info("🏢 Facility not configured yet; PUT /api/v1/facility to lay out slots")
    logger.info(f"🌐 Listening on http://{settings.BACKEND_IP}:{settings.BACKEND_PORT}")
    logger.info("📖 API docs at /docs")


@app.on_event("shutdown")
async def shutdown():
    logger.info("🛑 Garage backend shutting down...")


def run():
    """Console entry point: serve the API with uvicorn."""
    import uvicorn
    uvicorn.run(app, host=settings.BACKEND_IP, port=settings.BACKEND_PORT)
