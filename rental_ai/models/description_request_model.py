"""
/**
 * @file rental_ai/models/description_request_model.py
 * @description Property description enhancement input/output models (Pydantic).
 */
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, StrictStr


class EnhancePropertyDescriptionInput(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    description: StrictStr = Field(..., description="The original property description.")
    property_type: StrictStr = Field(
        ...,
        alias="propertyType",
        description="The type of property (e.g., apartment, house, studio).",
    )
    target_student_profile: StrictStr = Field(
        ...,
        alias="targetStudentProfile",
        description="Description of the target student profile (e.g., Erasmus student, Masters student).",
    )
    desired_tone: StrictStr = Field(
        ...,
        alias="desiredTone",
        description="The desired tone of the enhanced description (e.g., friendly, professional, exciting).",
    )


class EnhancePropertyDescriptionOutput(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    enhanced_description: StrictStr = Field(
        ..., alias="enhancedDescription", description="The enhanced property description."
    )
