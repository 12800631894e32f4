"""
Token set and theme IR types.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator


class TokenSetStatus(StrEnum):
    """How a theme uses a token set."""

    SOURCE = "source"
    ENABLED = "enabled"
    DISABLED = "disabled"


class TokenSet(BaseModel):
    """An ordered, named group of token ids (usually one input file)."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Set slug, e.g. 'core/colors'")
    token_ids: list[str] = Field(default_factory=list)


class Theme(BaseModel):
    """
    A named selection of token sets.

    Disabled sets are dropped on construction, so ``sets`` only ever holds
    ``source`` and ``enabled`` entries, in declaration order.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    sets: dict[str, TokenSetStatus] = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def _drop_disabled(cls, data: Any) -> Any:
        if isinstance(data, dict) and isinstance(data.get("sets"), dict):
            data = dict(data)
            data["sets"] = {
                set_name: status
                for set_name, status in data["sets"].items()
                if status != TokenSetStatus.DISABLED
            }
        return data

    @property
    def source_sets(self) -> list[str]:
        return [name for name, status in self.sets.items() if status == TokenSetStatus.SOURCE]

    @property
    def enabled_sets(self) -> list[str]:
        return [name for name, status in self.sets.items() if status == TokenSetStatus.ENABLED]

    @property
    def active_sets(self) -> list[str]:
        """Source sets first, then enabled sets."""
        return self.source_sets + self.enabled_sets

    @property
    def file_stem(self) -> str:
        """Output file stem: ``"Brand / Dark"`` becomes ``"Brand-Dark"``."""
        return "-".join(part.strip() for part in self.name.split("/"))
