"""
/**
 * @file rental_ai/services/prompt_service.py
 * @description Schema-bound prompt templates and the executor interface behind them.
 */
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, Generic, Optional, Protocol, Type, TypeVar

from pydantic import BaseModel

from rental_ai.errors import ExecutionError


InputT = TypeVar("InputT", bound=BaseModel)
OutputT = TypeVar("OutputT", bound=BaseModel)

# {{{field}}} and {{field}}, both substitute the raw value
_PLACEHOLDER_RE = re.compile(r"\{\{\{\s*([A-Za-z_]\w*)\s*\}\}\}|\{\{\s*([A-Za-z_]\w*)\s*\}\}")


def render_template(template: str, values: Dict[str, Any]) -> str:
    """Substitute ``{{field}}`` placeholders. Unknown fields render empty."""

    def _sub(match: re.Match) -> str:
        key = match.group(1) or match.group(2)
        value = values.get(key)
        return "" if value is None else str(value)

    return _PLACEHOLDER_RE.sub(_sub, template)


@dataclass
class PromptResult(Generic[OutputT]):
    output: Optional[OutputT] = None


PromptRunner = Callable[["PromptTemplate", str], Awaitable[PromptResult]]


class PromptTemplate(Generic[InputT, OutputT]):
    """A named instruction bound to an input and an output model.

    Calling the template validates the input, renders the instruction and
    hands it to the executor that defined it.
    """

    def __init__(
        self,
        name: str,
        input_model: Type[InputT],
        output_model: Type[OutputT],
        template: str,
        runner: PromptRunner,
    ):
        self.name = name
        self.input_model = input_model
        self.output_model = output_model
        self.template = template
        self._runner = runner

    def render(self, input_value: Any) -> str:
        value = self.input_model.model_validate(input_value)
        return render_template(self.template, value.model_dump(by_alias=True))

    async def __call__(self, input_value: Any) -> PromptResult[OutputT]:
        return await self._runner(self, self.render(input_value))


class PromptExecutor(Protocol):
    def define_prompt(
        self,
        name: str,
        input_model: Type[InputT],
        output_model: Type[OutputT],
        template: str,
    ) -> PromptTemplate[InputT, OutputT]:
        ...


async def run_prompt(template: PromptTemplate[InputT, OutputT], input_value: Any) -> OutputT:
    result = await template(input_value)
    if result.output is None:
        raise ExecutionError(f"Prompt '{template.name}' returned no output")
    return result.output
