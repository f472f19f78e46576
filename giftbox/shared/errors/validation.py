# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Any

from pydantic import ValidationError as PydanticValidationError


def _error_text(error: Any) -> str:
    ctx = error.get("ctx") or {}
    if error.get("type") == "value_error" and "error" in ctx:
        return str(ctx["error"])
    return str(error.get("msg", "invalid value"))


def format_pydantic_errors(exc: PydanticValidationError) -> str:
    """Render pydantic errors as ``"field: message"`` parts joined by ``"; "``."""

    parts = []
    for error in exc.errors():
        loc = error.get("loc", ())
        field_path = ".".join(str(part) for part in loc if part is not None)
        text = _error_text(error)
        parts.append(f"{field_path}: {text}" if field_path else text)
    return "; ".join(parts)


__all__ = [
    "format_pydantic_errors",
]
