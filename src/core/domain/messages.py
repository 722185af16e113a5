"""Tagged status messages.

The core never touches console colours: it returns a `StatusMessage` and the
CLI decides how each kind is presented.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class StatusKind(str, Enum):
    """Severity of a user-facing status line."""

    INFO = "info"
    WARN = "warn"
    SUCCESS = "success"

    def label(self) -> str:
        """Human readable label for logging."""

        return self.value.upper()


class StatusMessage(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: StatusKind = Field(..., description="Presentation hint for the terminal.")
    text: str = Field(..., min_length=1, description="Message shown to the user.")


def info(text: str) -> StatusMessage:
    return StatusMessage(kind=StatusKind.INFO, text=text)


def warn(text: str) -> StatusMessage:
    return StatusMessage(kind=StatusKind.WARN, text=text)


def success(text: str) -> StatusMessage:
    return StatusMessage(kind=StatusKind.SUCCESS, text=text)
