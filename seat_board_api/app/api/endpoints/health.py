"""
Liveness endpoint.

Reports that the process is serving requests.  It deliberately does not
touch the seat store, so a slow or unreachable store does not make the
process look dead.
"""

from typing import Dict

from fastapi import APIRouter

router = APIRouter()


@router.get("/health", response_model=Dict[str, str])
async def health() -> Dict[str, str]:
    return {"status": "ok"}
