# src/kova/config/models.py
"""
@brief
Pydantic model for validation runtime configuration.

@details
`ValidationConfig` bundles everything a top-level `try_validate` call needs
besides the input: execution policy, logging hook, locale and the
directories holding user message bundles. Instances are frozen and may be
shared between threads.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ValidationConfig(BaseModel):
    """
    @brief
    Runtime options for one validation call.

    @params
        fail_fast : bool
            Stop at the first violation instead of collecting all of them.
        locale : str
            Locale messages are rendered in ("en", "ja", "fr_FR", "fr-FR").
        message_dirs : list[Path]
            Directories searched for user `kova[_locale].yaml` bundles.
        logger : Callable | None
            Hook called with one LogEntry per constraint evaluation.
    """

    model_config = ConfigDict(
        extra="forbid",  # Reject unknown fields
        frozen=True,  # Shared across validations
        arbitrary_types_allowed=True,
    )

    fail_fast: bool = Field(False, description="Stop at the first violation.")
    locale: str = Field("en", description="Message locale, language[_COUNTRY].")
    message_dirs: list[Path] = Field(
        default_factory=list, description="Directories holding user message bundles."
    )
    logger: Callable[[Any], None] | None = Field(
        None, description="Hook receiving one LogEntry per constraint check.", exclude=True
    )

    @field_validator("locale")
    @classmethod
    def _check_locale(cls, v: str) -> str:
        if v.strip() != v or " " in v:
            raise ValueError("locale must not contain whitespace")
        return v


__all__ = ["ValidationConfig"]
