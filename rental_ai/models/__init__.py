"""
/**
 * @file rental_ai/models/__init__.py
 * @description Data model exports.
 */
"""

from .description_request_model import EnhancePropertyDescriptionInput, EnhancePropertyDescriptionOutput
from .translate_request_model import TranslateChatMessageInput, TranslateChatMessageOutput

__all__ = [
    "EnhancePropertyDescriptionInput",
    "EnhancePropertyDescriptionOutput",
    "TranslateChatMessageInput",
    "TranslateChatMessageOutput",
]
