"""
API Routers Package

Available Routers:
    - jobs_router: Job creation and status endpoints
"""

from .jobs import router as jobs_router

__all__ = ["jobs_router"]
