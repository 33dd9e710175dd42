"""
/**
 * @file rental_ai/services/translation_service.py
 * @description Chat message translation between two languages (Qwen, with a non-AI fallback).
 */
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Union

from rental_ai.models import TranslateChatMessageInput, TranslateChatMessageOutput
from rental_ai.services.backend_service import Backend, ConfiguredBackend, resolve_backend
from rental_ai.services.prompt_service import run_prompt


logger = logging.getLogger("rental_ai.translation")

PROMPT_NAME = "translateChatMessagePrompt"
PROMPT_TEMPLATE = """You are a multilingual translator specializing in chat messages.

Translate the following chat message from {{sourceLanguage}} to {{targetLanguage}}:

{{text}}"""


def fallback_translation(request: TranslateChatMessageInput) -> TranslateChatMessageOutput:
    return TranslateChatMessageOutput(
        translated_text=f"[Translation: {request.text}] (AI translation requires backend API)"
    )


async def translate_chat_message(
    payload: Union[TranslateChatMessageInput, Dict[str, Any]],
    backend: Optional[Backend] = None,
) -> TranslateChatMessageOutput:
    """Translate a chat message from ``sourceLanguage`` to ``targetLanguage``.

    Raises ``pydantic.ValidationError`` for a malformed payload before any
    backend is touched, and ``ExecutionError`` when the backend gives no
    usable output.
    """
    request = TranslateChatMessageInput.model_validate(payload)
    b = backend or resolve_backend()

    if not isinstance(b, ConfiguredBackend):
        logger.info("Translation fallback used (%s)", b.reason)
        return fallback_translation(request)

    prompt = b.executor.define_prompt(
        PROMPT_NAME, TranslateChatMessageInput, TranslateChatMessageOutput, PROMPT_TEMPLATE
    )
    logger.info("Translating chat message %s -> %s", request.source_language, request.target_language)
    return await run_prompt(prompt, request)
