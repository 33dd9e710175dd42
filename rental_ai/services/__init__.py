"""
/**
 * @file rental_ai/services/__init__.py
 * @description Service layer exports.
 */
"""

from .backend_service import Backend, ConfiguredBackend, UnconfiguredBackend, get_backend, resolve_backend
from .dashscope_client_service import DashScopeClient, DashScopePromptExecutor
from .description_service import enhance_property_description
from .prompt_service import PromptExecutor, PromptResult, PromptTemplate, render_template, run_prompt
from .translation_service import translate_chat_message

__all__ = [
    "Backend",
    "ConfiguredBackend",
    "UnconfiguredBackend",
    "get_backend",
    "resolve_backend",
    "DashScopeClient",
    "DashScopePromptExecutor",
    "PromptExecutor",
    "PromptResult",
    "PromptTemplate",
    "render_template",
    "run_prompt",
    "enhance_property_description",
    "translate_chat_message",
]
