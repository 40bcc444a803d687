"""The routing input value.

A ``RoutingRequest`` is what the transport hands the dispatcher: already
parsed request parameters, the uploaded-file flag, and the submitted body
fields. The dispatcher reads it and never changes it.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from assman.http.forms import FormData
from assman.http.query import QueryParams


def _frozen(data: Mapping[str, Any] | None) -> Mapping[str, Any]:
    return MappingProxyType(dict(data or {}))


@dataclass(frozen=True, slots=True)
class RoutingRequest:
    """An immutable routing request.

    ``files`` may be a bool or a mapping of uploads; only its truthiness
    matters for routing.
    """

    params: Mapping[str, Any] = field(default_factory=dict)
    files: bool | Mapping[str, Any] = False
    body: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "params", _frozen(self.params))
        object.__setattr__(self, "body", _frozen(self.body))

    @classmethod
    def from_parts(
        cls,
        query_string: bytes | str = b"",
        form: FormData | None = None,
    ) -> RoutingRequest:
        """Create a RoutingRequest from a raw query string and parsed form.

        Form fields are also visible as params and win over query fields
        of the same name. The body holds the form fields only.
        """
        query = QueryParams(query_string)
        if form is None:
            return cls(params=dict(query))
        return cls(
            params={**dict(query), **dict(form)},
            files=dict(form.files),
            body=dict(form),
        )
