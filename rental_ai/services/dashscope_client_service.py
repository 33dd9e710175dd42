"""
/**
 * @file rental_ai/services/dashscope_client_service.py
 * @description DashScope wrapper: Qwen chat calls and the prompt executor built on them.
 */
"""

from __future__ import annotations

import asyncio
import json
import logging
import re
from typing import Any, Dict, Optional, Type

import requests
from pydantic import BaseModel, ValidationError

from rental_ai.config import Settings, load_settings
from rental_ai.errors import ExecutionError
from rental_ai.services.prompt_service import InputT, OutputT, PromptResult, PromptTemplate


logger = logging.getLogger("rental_ai.dashscope")

DEFAULT_QWEN_ENDPOINT = "https://dashscope.aliyuncs.com/compatible-mode/v1/chat/completions"
DEFAULT_QWEN_MODEL = "qwen-plus"

_FENCE_RE = re.compile(r"^\s*```(?:json)?\s*(.*)\s*```\s*$", re.DOTALL)


class DashScopeClient:
    def __init__(self, settings: Optional[Settings] = None):
        # settings are fetched per call unless pinned here
        self._initial_settings = settings

    @property
    def settings(self) -> Settings:
        return self._initial_settings or load_settings()

    @property
    def dashscope_api_key(self) -> Optional[str]:
        return self.settings.resolve_dashscope_key()

    def _get_headers(self, api_key: Optional[str] = None) -> Dict[str, str]:
        key = api_key or self.dashscope_api_key
        if not key:
            raise ValueError("Missing API key. Set DASHSCOPE_API_KEY or config.local.json")
        return {"Authorization": f"Bearer {key}", "Content-Type": "application/json"}

    def call_qwen(self, prompt: str, model: Optional[str] = None, json_output: bool = False) -> Dict[str, Any]:
        settings = self.settings
        endpoint = settings.endpoints.get("qwen") or DEFAULT_QWEN_ENDPOINT
        model_name = model or settings.models.get("qwen", DEFAULT_QWEN_MODEL)
        payload: Dict[str, Any] = {"model": model_name, "messages": [{"role": "user", "content": prompt}]}
        temperature = settings.parameters.get("temperature")
        if temperature is not None:
            payload["temperature"] = temperature
        if json_output:
            payload["response_format"] = {"type": "json_object"}

        try:
            response = requests.post(
                endpoint,
                headers=self._get_headers(),
                json=payload,
                timeout=settings.request_timeout,
            )
            if response.status_code == 200:
                data = response.json()
                content = data["choices"][0]["message"]["content"]
                return {"status": "success", "output": content}
            logger.warning("[%s] HTTP %s: %s", model_name, response.status_code, response.text[:200])
            return {"status": "error", "code": response.status_code, "message": response.text}
        except (requests.RequestException, ValueError, KeyError, IndexError, TypeError) as e:
            logger.error("[%s] request failed: %s", model_name, e)
            return {"status": "error", "message": str(e)}


def output_instruction(output_model: Type[BaseModel]) -> str:
    schema = json.dumps(output_model.model_json_schema(by_alias=True), ensure_ascii=False)
    return (
        "\n\nOutput should be in JSON format and conform to the following schema:\n\n"
        f"```\n{schema}\n```\n"
    )


def parse_json_output(content: str) -> Any:
    try:
        return json.loads(content)
    except json.JSONDecodeError:
        # Qwen may wrap the whole reply in ```json ... ```
        match = _FENCE_RE.match(content)
        if not match:
            raise
        return json.loads(match.group(1))


class DashScopePromptExecutor:
    """Runs prompt templates against Qwen and validates the JSON it returns."""

    def __init__(self, client: Optional[DashScopeClient] = None, model: Optional[str] = None):
        self.client = client or DashScopeClient()
        self.model = model

    def define_prompt(
        self,
        name: str,
        input_model: Type[InputT],
        output_model: Type[OutputT],
        template: str,
    ) -> PromptTemplate[InputT, OutputT]:
        return PromptTemplate(name, input_model, output_model, template, runner=self._run)

    async def _run(self, template: PromptTemplate, prompt: str) -> PromptResult:
        full_prompt = prompt + output_instruction(template.output_model)
        result = await asyncio.to_thread(self.client.call_qwen, full_prompt, model=self.model, json_output=True)

        if result.get("status") != "success":
            code = result.get("code")
            raise ExecutionError(
                f"Prompt '{template.name}' failed: {result.get('message', 'unknown error')}",
                code=code if isinstance(code, int) else None,
            )

        content = result.get("output")
        if content is not None and not isinstance(content, str):
            raise ExecutionError(f"Prompt '{template.name}' returned non-text content")
        content = (content or "").strip()
        if not content:
            return PromptResult(output=None)

        try:
            data = parse_json_output(content)
        except json.JSONDecodeError as e:
            logger.warning("[%s] JSON parse failed: %s", template.name, e)
            raise ExecutionError(f"Prompt '{template.name}' returned malformed output") from e

        try:
            return PromptResult(output=template.output_model.model_validate(data))
        except ValidationError as e:
            raise ExecutionError(f"Prompt '{template.name}' output does not match schema: {e}") from e
