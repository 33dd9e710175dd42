"""
/**
 * @file rental_ai/services/backend_service.py
 * @description AI backend variant: configured (has an executor) or unconfigured (fallback).
 */
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from rental_ai.config import Settings, load_settings
from rental_ai.services.dashscope_client_service import DashScopeClient, DashScopePromptExecutor
from rental_ai.services.prompt_service import PromptExecutor


@dataclass(frozen=True)
class ConfiguredBackend:
    executor: PromptExecutor


@dataclass(frozen=True)
class UnconfiguredBackend:
    reason: str = "no AI backend configured"


Backend = Union[ConfiguredBackend, UnconfiguredBackend]


def resolve_backend(settings: Optional[Settings] = None) -> Backend:
    s = settings or load_settings()
    if not s.ai_enabled:
        return UnconfiguredBackend(reason="AI features disabled in config")
    if not s.resolve_dashscope_key():
        return UnconfiguredBackend(reason="missing DashScope API key")
    return ConfiguredBackend(executor=DashScopePromptExecutor(DashScopeClient(settings=settings)))


def get_backend() -> Backend:
    """FastAPI dependency: backend for the current settings."""
    return resolve_backend()
