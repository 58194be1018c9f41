"""Error body models for Vessel API responses."""

import json
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ErrorMessage:
    """Human-readable message extracted from an error response body.

    Two body shapes are recognised, checked in order:

    1. ``{"error": {"message": "..."}}`` (Vessel API standard shape)
    2. ``{"message": "..."}`` (common alternative shape)
    """

    message: str
    shape: str  # "nested" or "flat"

    @classmethod
    def from_body(cls, body: bytes) -> "ErrorMessage | None":
        """Parse an error message from a raw response body.

        Args:
            body: Raw response body

        Returns:
            ErrorMessage, or None if the body is empty, not JSON, or matches
            neither shape with a non-empty message
        """
        if not body:
            return None

        try:
            data = json.loads(body)
        except (ValueError, RecursionError):
            return None

        if not isinstance(data, dict):
            return None

        error = data.get("error")
        if isinstance(error, dict):
            message = _non_empty_string(error.get("message"))
            if message is not None:
                return cls(message=message, shape="nested")

        message = _non_empty_string(data.get("message"))
        if message is not None:
            return cls(message=message, shape="flat")

        return None


def _non_empty_string(value: Any) -> str | None:
    if isinstance(value, str) and value:
        return value
    return None
