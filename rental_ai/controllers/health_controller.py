"""
/**
 * @file rental_ai/controllers/health_controller.py
 * @description Health check controller.
 */
"""

from fastapi import APIRouter


router = APIRouter()


@router.get("/health")
def health():
    from rental_ai.config import load_settings
    from rental_ai.services import ConfiguredBackend, resolve_backend

    settings = load_settings()
    backend = resolve_backend(settings)

    api_keys_status = {
        "dashscope": bool(settings.resolve_dashscope_key()),
    }
    is_configured = isinstance(backend, ConfiguredBackend)

    checks = {
        "ai_enabled": settings.ai_enabled,
        "backend": "configured" if is_configured else "unconfigured",
        "api_keys": api_keys_status,
    }
    if not is_configured:
        checks["reason"] = backend.reason

    return {
        "status": "ok" if is_configured else "degraded",
        "checks": checks,
    }
