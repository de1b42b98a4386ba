"""Object exercises: a rectangle and a JSON serialize/deserialize pair."""

from __future__ import annotations

import dataclasses
import json
from dataclasses import dataclass
from typing import Any, TypeVar

__all__ = ["Rectangle", "get_json", "from_json"]

T = TypeVar("T")


@dataclass
class Rectangle:
    """A rectangle with a width, a height and an area.

    Example:
        r = Rectangle(10, 20)
        r.width       # 10
        r.height      # 20
        r.get_area()  # 200
    """

    width: float
    height: float

    def get_area(self) -> float:
        return self.width * self.height


def _public_fields(obj: Any) -> dict[str, Any]:
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return {f.name: getattr(obj, f.name) for f in dataclasses.fields(obj)}
    if hasattr(obj, "__dict__"):
        return {
            key: value
            for key, value in vars(obj).items()
            if not key.startswith("_") and not callable(value)
        }
    slots = getattr(type(obj), "__slots__", None)
    if slots is not None:
        names = (slots,) if isinstance(slots, str) else slots
        return {
            name: getattr(obj, name)
            for name in names
            if not name.startswith("_") and hasattr(obj, name)
        }
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def get_json(obj: Any) -> str:
    """Return the compact JSON representation of *obj*.

    Examples:
        [1, 2, 3]                  -> '[1,2,3]'
        {"width": 10, "height": 20} -> '{"width":10,"height":20}'
        Rectangle(10, 20)          -> '{"width":10,"height":20}'
    """
    return json.dumps(obj, separators=(",", ":"), default=_public_fields)


def from_json(cls: type[T], text: str) -> T:
    """Return an instance of *cls* populated from a JSON object.

    ``cls.__init__`` is not called; the decoded keys become instance
    attributes, so methods of *cls* are available on the result.
    """
    data = json.loads(text)
    if not isinstance(data, dict):
        raise TypeError(
            f"Expected a JSON object for {cls.__name__}, got {type(data).__name__}"
        )
    instance = cls.__new__(cls)
    for key, value in data.items():
        setattr(instance, key, value)
    return instance
