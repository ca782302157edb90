"""Pydantic models for hostfetch configuration."""

from typing import Literal

from pydantic import BaseModel, Field, field_validator

from hostfetch.display.renderer import INFO_LABELS
from hostfetch.utils.process import COMMAND_TIMEOUT


class HostfetchConfig(BaseModel):
    """User configuration, read from YAML."""

    art_style: Literal["rainbow", "flat"] = "rainbow"
    command_timeout: float = Field(default=COMMAND_TIMEOUT, gt=0, le=60)
    hide: list[str] = Field(default_factory=list)  # labels from INFO_LABELS
    color: bool | None = None  # None = detect from the terminal

    @field_validator("hide")
    @classmethod
    def _known_labels(cls, value: list[str]) -> list[str]:
        unknown = [label for label in value if label not in INFO_LABELS]
        if unknown:
            raise ValueError(
                f"Unknown info labels: {', '.join(unknown)}. "
                f"Options: {', '.join(INFO_LABELS)}"
            )
        return value
