"""Health check route."""

from fastapi import APIRouter

router = APIRouter()


@router.get("/health")
def health_check():
    """Liveness check."""
    return {"status": "healthy", "service": "rentals"}
