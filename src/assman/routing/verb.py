"""Verb classification.

The verb prefix comes from what the request carries, not from the HTTP
method line: uploaded files or any real body field make it ``post``,
otherwise ``get``. The reserved bookkeeping keys are stripped first so a
bare auth token or routing marker never turns a read into a write.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from assman.config import RESERVED_BODY_KEYS

GET = "get"
POST = "post"


@dataclass(frozen=True, slots=True)
class VerbClassification:
    """The verb plus the cleaned body that downstream controllers see."""

    verb: str
    body: Mapping[str, Any]


def strip_reserved(
    body: Mapping[str, Any],
    reserved: Iterable[str] = RESERVED_BODY_KEYS,
) -> Mapping[str, Any]:
    """Return a read-only copy of *body* without the *reserved* keys."""
    drop = frozenset(reserved)
    return MappingProxyType({k: v for k, v in body.items() if k not in drop})


def classify_verb(
    body: Mapping[str, Any],
    files: bool | Mapping[str, Any] = False,
    reserved: Iterable[str] = RESERVED_BODY_KEYS,
) -> VerbClassification:
    """Decide ``get`` or ``post`` for a request body and upload flag.

    The caller's mapping is left untouched.
    """
    cleaned = strip_reserved(body, reserved)
    verb = POST if files or cleaned else GET
    return VerbClassification(verb=verb, body=cleaned)


def ucfirst(token: str) -> str:
    """Upper-case the first character only; ``findAll`` -> ``FindAll``."""
    return token[:1].upper() + token[1:]


def method_identifier(verb: str, method_token: str) -> str:
    """Join verb and method token: ``("post", "find")`` -> ``"postFind"``."""
    return f"{verb}{ucfirst(method_token)}"
