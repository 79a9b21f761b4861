from __future__ import annotations

from fastapi import APIRouter

from .endpoints.ping import router as ping_router
from .endpoints.uid import router as uid_router

router = APIRouter()

router.include_router(ping_router)
router.include_router(uid_router)
