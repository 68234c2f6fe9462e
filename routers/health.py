from datetime import datetime, timezone

from fastapi import APIRouter

from utils.constants import API_PREFIX, ENVIRONMENT

router = APIRouter(tags=["health"])


@router.get("/health")
async def health() -> dict:
    """Liveness check"""
    return {
        "success": True,
        "message": "Server is running",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "environment": ENVIRONMENT,
    }


@router.get("/")
async def root() -> dict:
    """API banner listing the available endpoints"""
    return {
        "success": True,
        "message": "Restaurant Finder API",
        "version": "1.0.0",
        "endpoints": {
            "health": "/health",
            "restaurants": {
                "nearby": f"GET {API_PREFIX}/restaurants/nearby?latitude=24.876535&longitude=90.724821&radius=2",
                "all": f"GET {API_PREFIX}/restaurants",
                "byId": f"GET {API_PREFIX}/restaurants/:id",
                "cuisines": f"GET {API_PREFIX}/restaurants/cuisines",
            },
        },
    }
