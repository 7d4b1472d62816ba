"""Conversion record: one degrees/from/to computation with its cached result."""
from __future__ import annotations

from dataclasses import dataclass, field

from constants.scales import DISPLAY_PRECISION
from utils.scales import Scale
from utils.units import convert


def format_degrees(value: float) -> str:
    return f"{value:.{DISPLAY_PRECISION}f}"


@dataclass(frozen=True)
class Conversion:
    """Immutable record whose ``result`` is computed once at construction."""

    degrees: float
    from_scale: Scale
    to_scale: Scale
    result: float = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "result", convert(self.degrees, self.from_scale, self.to_scale))

    def render(self) -> str:
        return (
            f"{format_degrees(self.degrees)} {self.from_scale} "
            f"is {format_degrees(self.result)} {self.to_scale}"
        )

    def render_result(self) -> str:
        return format_degrees(self.result)

    def __str__(self) -> str:
        return self.render()


__all__ = ["Conversion", "format_degrees"]
