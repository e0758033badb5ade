from fastapi import APIRouter

from schemas.events import HealthResponse
from utils.timeutils import now_iso

router = APIRouter(tags=["Health"])


@router.get("/health", response_model=HealthResponse)
def health():
    return {"status": "OK", "timestamp": now_iso()}
