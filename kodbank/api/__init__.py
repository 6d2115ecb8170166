"""API routes."""

from fastapi import APIRouter

from kodbank.api import auth, balance, chat, health

router = APIRouter()
router.include_router(health.router, prefix="/health", tags=["health"])
router.include_router(auth.router, tags=["auth"])
router.include_router(balance.router, tags=["balance"])
router.include_router(chat.router, tags=["chat"])
