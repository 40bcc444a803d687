"""Form body adapter.

Reduces a raw request body to what routing needs from it: the submitted
fields (shape-preserving, see ``assman.http.query.fold_pairs``) and the
set of uploads, whose presence alone makes a request a ``post``.

URL-encoded bodies go through stdlib ``urllib.parse``; multipart bodies
through ``python-multipart``'s ``parse_form``.
"""

import io
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any
from urllib.parse import parse_qsl

from python_multipart import parse_form

from assman.http.query import fold_pairs

URLENCODED = "application/x-www-form-urlencoded"
MULTIPART = "multipart/form-data"


@dataclass(frozen=True, slots=True)
class UploadFile:
    """One uploaded file, held in memory."""

    field_name: str
    filename: str
    size: int
    content: bytes = field(repr=False)


class FormData(Mapping[str, Any]):
    """Immutable submitted fields plus uploads by field name.

    Usage::

        form = parse_form_data(body, content_type)
        request = RoutingRequest.from_parts(query_string, form)
    """

    __slots__ = ("_data", "_files")

    def __init__(
        self,
        data: Mapping[str, Any] | None = None,
        files: Mapping[str, UploadFile] | None = None,
    ) -> None:
        object.__setattr__(self, "_data", dict(data or {}))
        object.__setattr__(self, "_files", dict(files or {}))

    @property
    def files(self) -> Mapping[str, UploadFile]:
        return self._files

    def __getitem__(self, key: str) -> Any:
        return self._data[key]

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"FormData({self._data!r}, files={sorted(self._files)!r})"


def parse_form_data(body: bytes, content_type: str) -> FormData:
    """Parse a form body.

    Raises:
        ValueError: If the content type is not a form encoding, or a
            multipart body has no boundary.
    """
    media_type = content_type.split(";", 1)[0].strip().lower()

    if media_type == URLENCODED:
        pairs = parse_qsl(body.decode("utf-8"), keep_blank_values=True)
        return FormData(fold_pairs(pairs))

    if media_type == MULTIPART:
        if "boundary=" not in content_type.lower():
            msg = "Multipart form data missing boundary parameter"
            raise ValueError(msg)
        return _parse_multipart(body, content_type)

    msg = f"Unsupported form content type: {content_type!r}"
    raise ValueError(msg)


def _parse_multipart(body: bytes, content_type: str) -> FormData:
    pairs: list[tuple[str, str]] = []
    uploads: dict[str, UploadFile] = {}

    def on_field(part: Any) -> None:
        if part.field_name is None:
            return
        name = part.field_name.decode("utf-8")
        value = b"" if part.value is None else part.value
        pairs.append((name, value.decode("utf-8", errors="replace")))

    def on_file(part: Any) -> None:
        if part.field_name is None:
            part.close()
            return
        part.file_object.seek(0)
        content = part.file_object.read()
        part.close()
        name = part.field_name.decode("utf-8")
        uploads[name] = UploadFile(
            field_name=name,
            filename=(part.file_name or b"").decode("utf-8"),
            size=len(content),
            content=content,
        )

    headers = {"Content-Type": content_type, "Content-Length": str(len(body))}
    parse_form(headers, io.BytesIO(body), on_field, on_file)
    return FormData(fold_pairs(pairs), uploads)
