"""
==============================================================================
Health Check Endpoints
==============================================================================

System health status endpoints for monitoring and orchestration.

==============================================================================
"""

from fastapi import APIRouter, Request


router = APIRouter(prefix="/health", tags=["Health"])


class HealthController:
    """Controller for health check operations."""

    def __init__(self, request: Request):
        self._state = request.app.state

    def check_registry(self) -> dict:
        """Check registry status."""
        registry = getattr(self._state, "registry", None)
        if registry is None:
            return {"status": "not_loaded", "types": 0}
        if not len(registry):
            return {"status": "empty", "types": 0}
        return {"status": "healthy", "types": len(registry)}

    def get_health(self) -> dict:
        """Get full health status."""
        registry_info = self.check_registry()
        board = getattr(self._state, "board", None)

        overall = "healthy" if registry_info["status"] == "healthy" else "degraded"

        return {
            "status": overall,
            "components": {
                "api": "healthy",
                "registry": registry_info["status"]
            },
            "details": {
                "product_types": registry_info["types"],
                "products": len(board) if board is not None else 0
            }
        }


@router.get("")
async def health_check(request: Request):
    """
    Health check endpoint.

    Returns system status including API and registry.
    """
    return HealthController(request).get_health()


@router.get("/ready")
async def readiness_check():
    """Readiness probe for container orchestration."""
    return {"ready": True}


@router.get("/live")
async def liveness_check():
    """Liveness probe for container orchestration."""
    return {"alive": True}
