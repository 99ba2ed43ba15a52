# hdrcomplete/paths.py
from __future__ import annotations

import os
import collections.abc
import logging
from typing import Callable, List, Sequence, Union

from .errors import ConfigurationError

log = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]
PathSource = Union[Sequence[PathLike], Callable[[], Sequence[PathLike]]]


def _as_directory_list(value, origin: str) -> List[str]:
    # a lone string is a single path, not a list of directories
    if isinstance(value, (str, bytes)) or not isinstance(value, collections.abc.Sequence):
        raise ConfigurationError(
            f"{origin} must be a list of directories, got {type(value).__name__}"
        )
    out: List[str] = []
    for item in value:
        if not isinstance(item, (str, os.PathLike)):
            raise ConfigurationError(
                f"{origin} contains a non-path entry: {item!r}"
            )
        out.append(os.fspath(item))
    return out


def resolve(source: PathSource) -> List[str]:
    """
    Turn a path source into a concrete, ordered list of directories.

    A static list is returned as-is (PathLike entries become str). A callable
    is invoked once with no arguments and its result validated the same way.
    Raises ConfigurationError for a failing callable or a malformed value.
    """
    if callable(source):
        name = getattr(source, "__name__", type(source).__name__)
        try:
            value = source()
        except Exception as e:
            raise ConfigurationError(f"path source {name}() failed: {e}") from e
        return _as_directory_list(value, f"path source {name}()")
    return _as_directory_list(source, "path list")


def resolve_quietly(source: PathSource, label: str) -> List[str]:
    """resolve(), degrading a misconfigured source to an empty list."""
    try:
        return resolve(source)
    except ConfigurationError as e:
        log.warning("Ignoring %s paths: %s", label, e)
        return []


def split_path_list(value: str) -> List[str]:
    return [p for p in value.split(os.pathsep) if p]


def env_path_source(var: str, default: PathSource) -> Callable[[], List[str]]:
    """
    Path source reading an os.pathsep-separated list from environment
    variable `var` at call time; falls back to `default` when unset/empty.
    """
    def _source() -> List[str]:
        raw = os.environ.get(var, "")
        paths = split_path_list(raw)
        if paths:
            return paths
        return resolve(default)

    _source.__name__ = f"env[{var}]"
    return _source
