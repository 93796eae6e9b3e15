from fastapi import APIRouter

from remix.config import config

router = APIRouter()

@router.get("/health")
async def health_check():
    return {"status": "healthy"}

@router.get("/ready")
async def readiness_check():
    # The pipeline has no external services; only error tracking is optional
    return {
        "ready": True,
        "services": {
            "config": True,
            "pipeline": True,
            "sentry": config.has_sentry
        }
    }
