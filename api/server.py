# api/server.py
from contextlib import asynccontextmanager

from fastapi import FastAPI
from loguru import logger
from prometheus_client import make_asgi_app

from api.middleware.auth import install_registry
from api.routes.roles import router as roles_router


# --- Lifespan Manager (Startup/Shutdown) ---


@asynccontextmanager
async def lifespan(app: FastAPI):
    registry = install_registry(app)
    logger.info(f"Authorization table loaded. Registered roles: {len(registry)}")

    yield


# --- App Definition ---
app = FastAPI(title="Static RBAC API", lifespan=lifespan)

# Mount Prometheus Metrics Endpoint
metrics_app = make_asgi_app()
app.mount("/metrics", metrics_app)


@app.get("/")
def root():
    return {"message": "static-rbac API is running"}


@app.get("/health")
async def health():
    return {"status": "ok"}


app.include_router(roles_router)
