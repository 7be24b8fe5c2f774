"""Typed scalar values stored in mod configuration.

Every value is kept as text together with a kind tag. The text is produced by
`ValueKind.to_text` on write and turned back into a native value by
`ValueKind.parse` on read.
"""
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Any


class ValueKind(str, Enum):
    STRING = "string"
    INT = "int"
    FLOAT = "float"
    DOUBLE = "double"
    BOOL = "bool"

    def to_text(self, value: Any) -> str:
        """Return the stored text for `value`.

        Raises TypeError if `value` is not of this kind's native type
        (`bool` is not accepted as an int, but an int is accepted as a float).
        """
        if self is ValueKind.STRING:
            if not isinstance(value, str):
                raise TypeError(f"expected str for {self.value}, got {type(value).__name__}")
            return value
        if self is ValueKind.BOOL:
            if not isinstance(value, bool):
                raise TypeError(f"expected bool for {self.value}, got {type(value).__name__}")
            return "True" if value else "False"
        if isinstance(value, bool):
            raise TypeError(f"expected number for {self.value}, got bool")
        if self is ValueKind.INT:
            if not isinstance(value, int):
                raise TypeError(f"expected int for {self.value}, got {type(value).__name__}")
            return str(value)
        if not isinstance(value, (int, float)):
            raise TypeError(f"expected float for {self.value}, got {type(value).__name__}")
        return repr(float(value))

    def parse(self, text: str) -> Any:
        """Convert `text` to the native type. Raises ValueError if it does not parse."""
        if self is ValueKind.STRING:
            return text
        if self is ValueKind.INT:
            return int(text)
        if self in (ValueKind.FLOAT, ValueKind.DOUBLE):
            return float(text)
        lowered = text.strip().lower()
        if lowered == "true":
            return True
        if lowered == "false":
            return False
        raise ValueError(f"invalid literal for bool: {text!r}")


@dataclass(frozen=True)
class TypedValue:
    kind: ValueKind
    text: str

    @classmethod
    def of(cls, kind: ValueKind, value: Any) -> "TypedValue":
        return cls(kind, kind.to_text(value))
