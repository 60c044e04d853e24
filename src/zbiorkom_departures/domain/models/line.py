"""Transit line domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Line:
    """Identifies the transit line serving a departure."""

    number: str | None
    color: str | None = None
