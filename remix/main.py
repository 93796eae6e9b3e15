"""
HTTP entry point.
"""
import json
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI, Request, HTTPException

from remix.config import config
from remix.logger import logger
from remix.errors import DataContractError
from remix.health import router as health_router
from remix.models.listing import ListingFragment
from remix.normalizers.listing import ListingNormalizer
from remix.ranking import rank_records
from remix.display import build_card
from remix.sentry import initialize_sentry, capture_pipeline_error


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifecycle."""
    logger.info("Starting Listing Remix")
    initialize_sentry()
    
    yield
    
    logger.info("Shutting down Listing Remix")

# Create FastAPI app
app = FastAPI(
    title="Listing Remix API",
    description="Normalizes, deduplicates and ranks scraped product search listings",
    version="1.0.0",
    lifespan=lifespan
)
app.include_router(health_router)


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "service": "Listing Remix",
        "version": "1.0.0",
        "status": "operational",
        "timestamp": datetime.now(timezone.utc).isoformat()
    }


def _parse_listings(data) -> list:
    if not isinstance(data, dict):
        raise DataContractError("Request body must be a JSON object")

    raw_listings = data.get("listings")
    if raw_listings is None:
        return []
    if not isinstance(raw_listings, list):
        raise DataContractError("'listings' must be a list")

    return [ListingFragment.from_dict(raw) for raw in raw_listings]


def _parse_origin(data) -> str:
    origin = data.get("origin")
    if origin is not None and not isinstance(origin, str):
        raise DataContractError("'origin' must be a string")
    return origin


@app.post("/api/v1/listings/normalize")
async def normalize_listings(request: Request):
    """Normalize one page of scraped listings into ranked product records."""
    payload_size = 0
    try:
        data = await request.json()
        listings = _parse_listings(data)
        payload_size = len(listings)

        truncated = False
        if len(listings) > config.MAX_LISTINGS:
            logger.info(f"Limiting listings to {config.MAX_LISTINGS} (got {len(listings)})")
            listings = listings[:config.MAX_LISTINGS]
            truncated = True

        normalizer = ListingNormalizer(origin=_parse_origin(data))
        records = rank_records(normalizer.normalize_batch(listings))

        return {
            "success": True,
            "count": len(records),
            "duplicates": normalizer.duplicates,
            "truncated": truncated,
            "results": [record.to_dict() for record in records],
            "cards": [build_card(record) for record in records],
            "timestamp": datetime.now(timezone.utc).isoformat()
        }

    except DataContractError as e:
        logger.warning(f"Rejected listing payload: {e}")
        raise HTTPException(status_code=400, detail=str(e))

    except json.JSONDecodeError as e:
        logger.warning(f"Unreadable request body: {e}")
        raise HTTPException(status_code=400, detail="Request body must be valid JSON")

    except Exception as e:
        logger.error(f"Unexpected error: {e}", exc_info=True)
        capture_pipeline_error(payload_size, e)
        raise HTTPException(status_code=500, detail="Internal server error")


if __name__ == "__main__":
    import os
    import uvicorn
    port = int(os.environ.get("PORT", 8000))
    uvicorn.run(app, host="0.0.0.0", port=port)
