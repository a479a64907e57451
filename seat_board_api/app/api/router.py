"""
Top-level router for the seat board API.

Mounted under ``/api`` by ``main.create_app``.  When new endpoints are
added, include their routers here.
"""

from fastapi import APIRouter

from .endpoints import seats

router = APIRouter()

router.include_router(seats.router, tags=["seats"])
