from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging

from .api.parse import router as parse_router
from .core.config import get_settings

settings = get_settings()

# Configure logging
logging.basicConfig(
    level=settings.log_level.upper(),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

VERSION = "0.1.0"

app = FastAPI(
    title=settings.app_name,
    version=VERSION,
    description="Turns generated chat and recipe text into renderable structures",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(parse_router)


@app.get("/api/health")
async def health_check():
    return {"status": "ok", "message": f"{settings.app_name} is running", "version": VERSION}
