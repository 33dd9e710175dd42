"""
/**
 * @file rental_ai/services/description_service.py
 * @description Property description enhancement for student renters (Qwen, with a non-AI fallback).
 */
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Union

from rental_ai.models import EnhancePropertyDescriptionInput, EnhancePropertyDescriptionOutput
from rental_ai.services.backend_service import Backend, ConfiguredBackend, resolve_backend
from rental_ai.services.prompt_service import run_prompt


logger = logging.getLogger("rental_ai.description")

FALLBACK_SUFFIX = " (Enhanced description - AI features require backend API)"

PROMPT_NAME = "enhancePropertyDescriptionPrompt"
PROMPT_TEMPLATE = """You are a real estate marketing expert specializing in student rentals. Enhance the following property description to make it more appealing to the specified target student profile, using the desired tone.  Maintain the original length and structure.

Original Description: {{{description}}}
Property Type: {{{propertyType}}}
Target Student Profile: {{{targetStudentProfile}}}
Desired Tone: {{{desiredTone}}}

Enhanced Description:"""


def fallback_description(request: EnhancePropertyDescriptionInput) -> EnhancePropertyDescriptionOutput:
    # original text is kept verbatim
    return EnhancePropertyDescriptionOutput(enhanced_description=request.description + FALLBACK_SUFFIX)


async def enhance_property_description(
    payload: Union[EnhancePropertyDescriptionInput, Dict[str, Any]],
    backend: Optional[Backend] = None,
) -> EnhancePropertyDescriptionOutput:
    request = EnhancePropertyDescriptionInput.model_validate(payload)
    b = backend or resolve_backend()

    if not isinstance(b, ConfiguredBackend):
        logger.info("Description enhancement fallback used (%s)", b.reason)
        return fallback_description(request)

    prompt = b.executor.define_prompt(
        PROMPT_NAME, EnhancePropertyDescriptionInput, EnhancePropertyDescriptionOutput, PROMPT_TEMPLATE
    )
    logger.info("Enhancing %s description for '%s'", request.property_type, request.target_student_profile)
    return await run_prompt(prompt, request)
