"""Schema-tolerant view over a decoded dictionary API payload."""

from __future__ import annotations

import json
from typing import Any

from ydict.exceptions import DecodeError

_TYPE_NAMES = {
    dict: "object",
    list: "list",
    str: "string",
    bool: "boolean",
    int: "number",
    float: "number",
}


def _type_name(value: Any) -> str:
    return _TYPE_NAMES.get(type(value), type(value).__name__)


class PayloadNode:
    """A JSON object wrapped with type-checked, absence-tolerant accessors.

    Every accessor treats a missing key or an explicit ``null`` as the empty
    value of the requested kind, and raises DecodeError when the key holds a
    value of another JSON type. The dotted path is carried along so errors
    point at the offending field.
    """

    __slots__ = ("_data", "path")

    def __init__(self, data: dict[str, Any] | None = None, path: str = "$"):
        self._data = data or {}
        self.path = path

    @classmethod
    def parse(cls, raw_payload: bytes | str) -> PayloadNode:
        """Parse raw JSON text into the root node.

        Raises:
            DecodeError: If the text is not valid JSON or not a JSON object
        """
        try:
            data = json.loads(raw_payload)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise DecodeError(f"Malformed payload: {e}") from e

        return cls._wrap(data, "$")

    @classmethod
    def _wrap(cls, value: Any, path: str) -> PayloadNode:
        if value is None:
            return cls(None, path)
        if not isinstance(value, dict):
            raise DecodeError(f"Malformed payload: {path} expected object, got {_type_name(value)}")
        return cls(value, path)

    def __bool__(self) -> bool:
        return bool(self._data)

    def _child_path(self, key: str) -> str:
        return f"{self.path}.{key}"

    def object(self, key: str) -> PayloadNode:
        """Return the nested object under key (empty node when absent)."""
        return self._wrap(self._data.get(key), self._child_path(key))

    def array(self, key: str) -> list[PayloadNode]:
        """Return the list of objects under key (empty list when absent)."""
        path = self._child_path(key)
        value = self._data.get(key)
        if value is None:
            return []
        if not isinstance(value, list):
            raise DecodeError(f"Malformed payload: {path} expected list, got {_type_name(value)}")
        return [self._wrap(item, f"{path}[{i}]") for i, item in enumerate(value)]

    def first(self, key: str) -> PayloadNode:
        """Return the first object of the list under key (empty node when absent)."""
        items = self.array(key)
        return items[0] if items else PayloadNode(None, f"{self._child_path(key)}[0]")

    def string(self, key: str) -> str:
        """Return the string under key ("" when absent)."""
        value = self._data.get(key)
        if value is None:
            return ""
        if not isinstance(value, str):
            raise DecodeError(
                f"Malformed payload: {self._child_path(key)} expected string, "
                f"got {_type_name(value)}"
            )
        return value

    def strings(self, key: str) -> list[str]:
        """Return the list of strings under key (empty list when absent)."""
        path = self._child_path(key)
        value = self._data.get(key)
        if value is None:
            return []
        if not isinstance(value, list):
            raise DecodeError(f"Malformed payload: {path} expected list, got {_type_name(value)}")

        result = []
        for i, item in enumerate(value):
            if item is None:
                result.append("")
            elif isinstance(item, str):
                result.append(item)
            else:
                raise DecodeError(
                    f"Malformed payload: {path}[{i}] expected string, got {_type_name(item)}"
                )
        return result
