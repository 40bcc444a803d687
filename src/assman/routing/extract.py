"""Request descriptor extraction.

Reads the two routing fields, ``class`` and ``method``, from the request
parameters and applies defaults. Routing fields must be scalars: an
array-shaped value (``class[]=x``) is rejected before it can reach
controller lookup.
"""

from dataclasses import dataclass
from typing import Any

from assman.config import ManagerConfig
from assman.errors import InvalidRequestShape
from assman.routing.request import RoutingRequest

CLASS_FIELD = "class"
METHOD_FIELD = "method"


@dataclass(frozen=True, slots=True)
class RequestDescriptor:
    """Raw routing tokens, defaults applied, not yet normalized."""

    class_token: str
    method_token: str


def scalar_token(field: str, value: Any) -> str:
    """Convert a scalar request value to its text form.

    ``True`` becomes ``"1"`` and ``False`` becomes ``""``, the way form
    encoders serialize booleans. Anything composite raises
    ``InvalidRequestShape``.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "1" if value else ""
    if isinstance(value, (int, float)):
        return str(value)
    raise InvalidRequestShape(field, value)


def extract_descriptor(
    request: RoutingRequest,
    config: ManagerConfig | None = None,
) -> RequestDescriptor:
    """Pull ``class`` and ``method`` out of *request*.

    A missing key, or one set to ``None``, takes the configured default
    (``Page`` and ``index`` out of the box).

    Raises:
        InvalidRequestShape: If ``class`` or ``method`` is not a scalar.
    """
    config = config or ManagerConfig()
    raw_class = request.params.get(CLASS_FIELD)
    raw_method = request.params.get(METHOD_FIELD)

    class_token = (
        config.default_class if raw_class is None else scalar_token(CLASS_FIELD, raw_class)
    )
    method_token = (
        config.default_method if raw_method is None else scalar_token(METHOD_FIELD, raw_method)
    )
    return RequestDescriptor(class_token=class_token, method_token=method_token)
