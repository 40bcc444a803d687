"""Immutable query string parameters.

Values keep the shape the client sent. A key that appears once maps to a
``str``; a repeated key maps to a ``list[str]``; PHP-style bracket keys
(``class[]=a`` or ``class[x]=a``) fold into a ``list`` or ``dict`` under
the bare name. Composite values are what the request extractor rejects
for routing fields, so they must survive parsing intact.
"""

import re
from collections.abc import Iterator, Mapping
from typing import Any
from urllib.parse import parse_qsl

_BRACKET_KEY = re.compile(r"^(?P<name>[^\[\]]+)\[(?P<sub>[^\[\]]*)\]$")


def fold_pairs(pairs: list[tuple[str, str]]) -> dict[str, Any]:
    """Fold ``(key, value)`` pairs into a shape-preserving dict."""
    data: dict[str, Any] = {}
    for key, value in pairs:
        m = _BRACKET_KEY.match(key)
        if m is None:
            if key not in data:
                data[key] = value
            elif isinstance(data[key], list):
                data[key].append(value)
            else:
                data[key] = [data[key], value]
            continue

        name, sub = m.group("name"), m.group("sub")
        if sub:
            current = data.get(name)
            if not isinstance(current, dict):
                current = {}
                data[name] = current
            current[sub] = value
        else:
            current = data.get(name)
            if isinstance(current, list):
                current.append(value)
            else:
                data[name] = [value]
    return data


class QueryParams(Mapping[str, Any]):
    """Immutable query string parameters.

    Attributes:
        _data: Parsed query string as field name -> str, list, or dict.
        _raw: Raw query string bytes.
    """

    _data: dict[str, Any]
    _raw: bytes

    __slots__ = ("_data", "_raw")

    def __init__(self, query_string: bytes | str = b"") -> None:
        if isinstance(query_string, str):
            query_string = query_string.encode("latin-1")
        object.__setattr__(self, "_raw", query_string)
        pairs = parse_qsl(query_string.decode("latin-1"), keep_blank_values=True)
        object.__setattr__(self, "_data", fold_pairs(pairs))

    def __getitem__(self, key: str) -> Any:
        return self._data[key]

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        items = ", ".join(f"{k!r}: {self[k]!r}" for k in self)
        return f"QueryParams({{{items}}})"
