"""
/**
 * @file rental_ai/errors.py
 * @description Errors raised by the AI flows.
 */
"""

from __future__ import annotations

from typing import Optional


class ExecutionError(Exception):
    """The AI backend was reached but gave no usable output."""

    def __init__(self, message: str, code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.code = code

    def to_detail(self) -> dict:
        detail = {"status": "error", "message": self.message}
        if self.code is not None:
            detail["code"] = self.code
        return detail
