"""
/**
 * @file rental_ai/controllers/__init__.py
 * @description Controller (router) exports.
 */
"""

from .description_controller import router as description_router
from .health_controller import router as health_router
from .translate_controller import router as translate_router

__all__ = [
    "description_router",
    "health_router",
    "translate_router",
]
