from fastapi import APIRouter
from mandi_relay.api import translation

router = APIRouter()


@router.get("/health")
async def health():
    return {"status": "ok"}


# Include translation router
router.include_router(translation.router)
