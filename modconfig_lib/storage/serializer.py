from typing import Any, Protocol
import json
import yaml


class Serializer(Protocol):
    """Serialize/deserialize plain Python data for backends that store bytes.

    Implementations should be symmetric: `dump` -> bytes, `load` <- bytes.
    `extension` is the file suffix used for files written in this format.
    """

    extension: str

    def dump(self, value: Any) -> bytes: ...

    def load(self, data: bytes) -> Any: ...


class JSONSerializer:
    """Serializer using JSON (text). Output is indented for hand editing."""

    extension = ".json"

    def dump(self, value: Any) -> bytes:
        return json.dumps(value, indent=2, ensure_ascii=False).encode("utf-8")

    def load(self, data: bytes) -> Any:
        return json.loads(data.decode("utf-8-sig"))


class YAMLSerializer:
    """Serializer using YAML (text). Caller must ensure values are YAML-serializable."""

    extension = ".yml"

    def dump(self, value: Any) -> bytes:
        return yaml.safe_dump(value, sort_keys=False, allow_unicode=True).encode("utf-8")

    def load(self, data: bytes) -> Any:
        return yaml.safe_load(data.decode("utf-8-sig"))


_SERIALIZERS = {
    "json": JSONSerializer,
    "yaml": YAMLSerializer,
}


def get_serializer(name: str) -> Serializer:
    try:
        return _SERIALIZERS[name.lower()]()
    except KeyError:
        raise ValueError(f"Unknown serializer {name!r}; expected one of {sorted(_SERIALIZERS)}") from None
