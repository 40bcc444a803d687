"""Immutable process-wide option store.

Implements ``Mapping[str, str]``. Built once at startup (from a dict or
the process environment) and only read afterwards, so concurrent
dispatches can share one instance.
"""

from collections.abc import Iterator, Mapping

ENV_PREFIX = "ASSMAN_"


class Options(Mapping[str, str]):
    """Read-only option store with default-able lookups.

    Attributes:
        _data: Option key -> value.

    Usage::

        options = Options({"assman.core_path": "/srv/core/components/assman/"})
        options.get_option("assman.core_path", "core/components/assman/")
    """

    _data: dict[str, str]

    __slots__ = ("_data",)

    def __init__(self, data: Mapping[str, str] | None = None) -> None:
        object.__setattr__(self, "_data", dict(data or {}))

    def __setattr__(self, name: str, value: object) -> None:
        msg = "Options is immutable"
        raise AttributeError(msg)

    def __getitem__(self, key: str) -> str:
        return self._data[key]

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        items = ", ".join(f"{k!r}: {v!r}" for k, v in self._data.items())
        return f"Options({{{items}}})"

    def get_option(self, key: str, default: str) -> str:
        """Return the option for *key*, or *default* when it is unset.

        An option set to the empty string counts as set.
        """
        value = self._data.get(key)
        if value is None:
            return default
        return value

    @classmethod
    def from_env(
        cls,
        environ: Mapping[str, str],
        prefix: str = ENV_PREFIX,
        namespace: str = "assman",
    ) -> "Options":
        """Collect options from environment variables.

        ``ASSMAN_CORE_PATH`` becomes ``assman.core_path``. A double
        underscore after the prefix marks a global key:
        ``ASSMAN__MANAGER_URL`` becomes ``manager_url``.
        """
        data: dict[str, str] = {}
        for name, value in environ.items():
            if not name.startswith(prefix):
                continue
            rest = name[len(prefix):]
            if not rest:
                continue
            if rest.startswith("_"):
                key = rest.lstrip("_").lower()
                if not key:
                    continue
            else:
                key = f"{namespace}.{rest.lower()}"
            data[key] = value
        return cls(data)
