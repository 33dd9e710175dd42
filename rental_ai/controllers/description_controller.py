"""
/**
 * @file rental_ai/controllers/description_controller.py
 * @description Property description enhancement controller.
 */
"""

from fastapi import APIRouter, Depends, HTTPException

from rental_ai.errors import ExecutionError
from rental_ai.models import EnhancePropertyDescriptionInput, EnhancePropertyDescriptionOutput
from rental_ai.services import Backend, enhance_property_description, get_backend


router = APIRouter()


@router.post("/api/ai/enhance-property-description", response_model=EnhancePropertyDescriptionOutput)
async def enhance(req: EnhancePropertyDescriptionInput, backend: Backend = Depends(get_backend)):
    try:
        return await enhance_property_description(req, backend=backend)
    except ExecutionError as e:
        raise HTTPException(status_code=502, detail=e.to_detail())
