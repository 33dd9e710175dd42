"""
/**
 * @file rental_ai/controllers/translate_controller.py
 * @description Chat message translation controller.
 */
"""

from fastapi import APIRouter, Depends, HTTPException

from rental_ai.errors import ExecutionError
from rental_ai.models import TranslateChatMessageInput, TranslateChatMessageOutput
from rental_ai.services import Backend, get_backend, translate_chat_message


router = APIRouter()


@router.post("/api/ai/translate-chat-message", response_model=TranslateChatMessageOutput)
async def translate(req: TranslateChatMessageInput, backend: Backend = Depends(get_backend)):
    try:
        return await translate_chat_message(req, backend=backend)
    except ExecutionError as e:
        raise HTTPException(status_code=502, detail=e.to_detail())
