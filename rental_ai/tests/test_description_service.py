"""
/**
 * @file rental_ai/tests/test_description_service.py
 * @description Property description enhancement unit tests (fake executor, no network).
 */
"""

import unittest
from unittest.mock import AsyncMock, MagicMock, patch

from pydantic import ValidationError

from rental_ai.errors import ExecutionError
from rental_ai.models import EnhancePropertyDescriptionInput, EnhancePropertyDescriptionOutput
from rental_ai.services.backend_service import ConfiguredBackend, UnconfiguredBackend
from rental_ai.services.description_service import PROMPT_NAME, enhance_property_description
from rental_ai.services.prompt_service import PromptResult, PromptTemplate


PAYLOAD = {
    "description": "Cozy studio.",
    "propertyType": "studio",
    "targetStudentProfile": "Erasmus student",
    "desiredTone": "friendly",
}


class TestDescriptionService(unittest.IsolatedAsyncioTestCase):
    def setUp(self):
        self.runner = AsyncMock(
            return_value=PromptResult(output=EnhancePropertyDescriptionOutput(enhanced_description="Bright, cozy studio!"))
        )
        self.executor = MagicMock()
        self.executor.define_prompt.side_effect = lambda name, i, o, t: PromptTemplate(name, i, o, t, runner=self.runner)

    async def test_fallback_cozy_studio(self):
        result = await enhance_property_description(PAYLOAD, backend=UnconfiguredBackend())
        self.assertEqual(
            result.model_dump(by_alias=True),
            {"enhancedDescription": "Cozy studio. (Enhanced description - AI features require backend API)"},
        )

    async def test_fallback_keeps_original_text(self):
        original = "Line one.\nLine two with & and <tags>."
        result = await enhance_property_description(dict(PAYLOAD, description=original), backend=UnconfiguredBackend())
        self.assertTrue(result.enhanced_description.startswith(original))
        self.assertEqual(
            result.enhanced_description,
            original + " (Enhanced description - AI features require backend API)",
        )

    async def test_fallback_twice_same_result(self):
        first = await enhance_property_description(PAYLOAD, backend=UnconfiguredBackend())
        second = await enhance_property_description(PAYLOAD, backend=UnconfiguredBackend())
        self.assertEqual(first.enhanced_description, second.enhanced_description)

    async def test_missing_field_raises_before_backend(self):
        payload = dict(PAYLOAD)
        payload.pop("desiredTone")
        with self.assertRaises(ValidationError):
            await enhance_property_description(payload, backend=ConfiguredBackend(executor=self.executor))
        self.executor.define_prompt.assert_not_called()

    async def test_accepts_model_instance(self):
        req = EnhancePropertyDescriptionInput(
            description="Quiet room.",
            property_type="room",
            target_student_profile="Masters student",
            desired_tone="professional",
        )
        result = await enhance_property_description(req, backend=UnconfiguredBackend())
        self.assertEqual(result.enhanced_description, "Quiet room. (Enhanced description - AI features require backend API)")

    async def test_configured_backend(self):
        result = await enhance_property_description(PAYLOAD, backend=ConfiguredBackend(executor=self.executor))
        self.assertEqual(result.enhanced_description, "Bright, cozy studio!")
        self.assertEqual(self.executor.define_prompt.call_args.args[0], PROMPT_NAME)

        prompt = self.runner.await_args.args[1]
        self.assertIn("Original Description: Cozy studio.", prompt)
        self.assertIn("Property Type: studio", prompt)
        self.assertIn("Target Student Profile: Erasmus student", prompt)
        self.assertIn("Desired Tone: friendly", prompt)
        self.assertIn("Maintain the original length and structure.", prompt)
        self.assertTrue(prompt.endswith("Enhanced Description:"))

    async def test_configured_backend_without_output_raises(self):
        self.runner.return_value = PromptResult(output=None)
        with self.assertRaises(ExecutionError):
            await enhance_property_description(PAYLOAD, backend=ConfiguredBackend(executor=self.executor))

    async def test_default_backend_comes_from_settings(self):
        with patch(
            "rental_ai.services.description_service.resolve_backend",
            return_value=UnconfiguredBackend(),
        ) as resolve:
            result = await enhance_property_description(PAYLOAD)
        resolve.assert_called_once_with()
        self.assertTrue(result.enhanced_description.endswith("(Enhanced description - AI features require backend API)"))


if __name__ == "__main__":
    unittest.main()
