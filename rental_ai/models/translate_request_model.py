"""
/**
 * @file rental_ai/models/translate_request_model.py
 * @description Chat message translation input/output models (Pydantic).
 */
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, StrictStr


class TranslateChatMessageInput(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    text: StrictStr = Field(..., description="The chat message to translate.")
    source_language: StrictStr = Field(
        ..., alias="sourceLanguage", description="The language of the chat message."
    )
    target_language: StrictStr = Field(
        ..., alias="targetLanguage", description="The language to translate the chat message to."
    )


class TranslateChatMessageOutput(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    translated_text: StrictStr = Field(
        ..., alias="translatedText", description="The translated chat message."
    )
