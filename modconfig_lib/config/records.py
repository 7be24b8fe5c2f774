"""Record shape of a configuration file.

A file holds a list of records::

    [{"key": "volume", "value": {"type": "int", "value": "5"}}, ...]

`decode_table` validates the whole list before returning anything, so a
file is either accepted completely or rejected.
"""
from __future__ import annotations
from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field, StrictStr, TypeAdapter, ValidationError

from .errors import MalformedConfigError
from .types import TypedValue, ValueKind


class RecordValue(BaseModel):
    model_config = ConfigDict(extra="forbid")

    type: ValueKind
    value: StrictStr


class ConfigRecord(BaseModel):
    model_config = ConfigDict(extra="forbid")

    key: StrictStr = Field(min_length=1)
    value: RecordValue


_records = TypeAdapter(List[ConfigRecord])


def encode_table(table: Dict[str, TypedValue]) -> List[Dict[str, Any]]:
    return [
        {"key": key, "value": {"type": value.kind.value, "value": value.text}}
        for key, value in table.items()
    ]


def decode_table(data: Any) -> Dict[str, TypedValue]:
    try:
        records = _records.validate_python(data)
    except ValidationError as e:
        raise MalformedConfigError(f"invalid config format: {e.error_count()} error(s)") from e
    table: Dict[str, TypedValue] = {}
    for record in records:
        table[record.key] = TypedValue(record.value.type, record.value.value)
    return table
