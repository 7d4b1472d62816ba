"""Temperature scale type: prefix parsing and canonical rendering."""
from __future__ import annotations

from enum import Enum

from constants.error import InvalidScale
from constants.scales import (
    CANONICAL_SCALE_NAMES,
    CELSIUS_NAME,
    FAHRENHEIT_NAME,
    KELVIN_NAME,
    RANKINE_NAME,
)


class Scale(Enum):
    CELSIUS = CELSIUS_NAME
    FAHRENHEIT = FAHRENHEIT_NAME
    KELVIN = KELVIN_NAME
    RANKINE = RANKINE_NAME

    @classmethod
    def parse(cls, text: str) -> "Scale":
        """Resolve ``text`` to the first scale whose name starts with it.

        Matching is case-insensitive and untrimmed. An empty string is a
        prefix of every name and therefore resolves to Celsius.
        """
        candidate = text.lower()
        for name in CANONICAL_SCALE_NAMES:
            if name.startswith(candidate):
                return cls(name)
        raise InvalidScale()

    @property
    def shorthand(self) -> str:
        return self.value[0]

    def render(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.render()


__all__ = ["Scale"]
