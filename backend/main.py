from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging

from .config import settings
from .routers import layout

logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger("tilelayout")

app = FastAPI(
    title=settings.APP_NAME,
    description="Previews how rectangular units tile a plane under straight, staggered and herringbone patterns",
    version="1.0.0"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# API routes
app.include_router(layout.router, prefix="/api")
logger.info("Layout API mounted at /api/layout")

@app.get("/health")
def health():
    return {"status": "ok", "app": "tile-layout-preview"}
