from fastapi import APIRouter
from app.api.questions import router as questions_router
from app.api.config import router as config_router

# Create main API router with /api prefix
api_router = APIRouter(prefix="/api")

# Include question generation router
api_router.include_router(questions_router, tags=["questions"])

# Include configuration status router
api_router.include_router(config_router, prefix="/config", tags=["config"])
