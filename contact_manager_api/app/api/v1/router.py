"""
Top-level router for version 1 of the API.

This router aggregates the domain routers under a unified prefix.
When new endpoints are added, include their routers here.
"""

from fastapi import APIRouter

from .endpoints import contacts, health, views

router = APIRouter()

router.include_router(contacts.router, prefix="/contacts", tags=["contacts"])
router.include_router(views.router, prefix="/views", tags=["views"])
router.include_router(health.router, prefix="/health", tags=["health"])
