"""Parameters: named values describing a test or step."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, List


def _format_value(value: Any) -> str:
    if value is None:
        return "<nil>"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, (bytes, bytearray)):
        return "[" + " ".join(str(b) for b in value) + "]"
    if isinstance(value, (list, tuple)):
        return "[" + " ".join(_format_value(v) for v in value) + "]"
    if isinstance(value, dict):
        items = sorted((_format_value(k), _format_value(v)) for k, v in value.items())
        return "map[" + " ".join(f"{k}:{v}" for k, v in items) + "]"
    return str(value)


def _message(value: Any) -> str:
    return value if isinstance(value, str) else _format_value(value)


def _trim_brackets(text: str) -> str:
    if text.startswith("[") and text.endswith("]"):
        return text[1:-1]
    return text


@dataclass
class Parameter:
    """A named value; ``str()`` gives the value without surrounding quotes."""

    name: str
    value: Any

    def __str__(self) -> str:
        value = self.value
        if isinstance(value, (bytes, bytearray)):
            text = bytes(value).decode("utf-8", errors="replace")
        else:
            text = _message(value)
        return text.strip('"')

    def to_dict(self) -> dict:
        return {"name": self.name, "value": self.value}


def new_parameter(name: str, *values: Any) -> Parameter:
    """Build a parameter whose value is the given values joined by spaces."""
    return Parameter(name=name, value=" ".join(_format_value(v) if not isinstance(v, str) else v for v in values))


def new_parameters(*kv: Any) -> List[Parameter]:
    """Build parameters from alternating names and values; an odd last item is dropped."""
    names = kv[0::2]
    values = kv[1::2]
    return [
        new_parameter(_message(name), _trim_brackets(_message(value)))
        for name, value in zip(names, values)
    ]