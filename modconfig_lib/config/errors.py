"""Exceptions raised by the configuration store and its persistence layer."""


class CorruptValueError(ValueError):
    """A stored value does not parse as the kind it is tagged with."""

    def __init__(self, key: str, kind: str, text: str) -> None:
        super().__init__(f"Value {text!r} stored at {key!r} is not a valid {kind}")
        self.key = key
        self.kind = kind
        self.text = text


class MalformedConfigError(ValueError):
    """A configuration file does not contain a list of valid records."""


class ReentrantSetError(RuntimeError):
    """A change listener tried to write to the namespace it is being notified for."""
