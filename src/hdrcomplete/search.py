# hdrcomplete/search.py
from __future__ import annotations

import os
import logging
from typing import Iterable, List, Optional

from . import config as CFG
from .models import Candidate, Delimiter, IncludeReference, ModeFilter
from .paths import PathSource, resolve_quietly
from .scanner import scan
from .errors import ScanError

log = logging.getLogger(__name__)


def default_mode_filter(mode: str = CFG.DEFAULT_MODE) -> ModeFilter:
    return ModeFilter.compile(mode, CFG.DEFAULT_MODE_FILTERS[mode])


def search_directories(reference: IncludeReference, user_paths: PathSource, system_paths: PathSource) -> List[str]:
    """Quoted includes search the user paths, then fall back to the system paths."""
    if reference.delimiter is Delimiter.QUOTE:
        return resolve_quietly(user_paths, "user") + resolve_quietly(system_paths, "system")
    return resolve_quietly(system_paths, "system")


def candidates_for(reference: IncludeReference, directory: str, mode_filter: ModeFilter) -> List[Candidate]:
    """
    Candidates for one search directory. When the typed subdirectory exists
    under `directory`, complete the last segment inside it; otherwise match
    the whole typed path against `directory` itself.
    """
    delim = reference.delimiter.opening
    if reference.subdirectory is not None:
        subdir = os.path.join(directory, reference.subdirectory)
        if os.path.isdir(subdir):
            return scan(
                subdir,
                reference.filename_fragment,
                mode_filter,
                display_prefix=f"{delim}{reference.subdirectory}/",
            )
    return scan(directory, reference.raw_prefix, mode_filter, display_prefix=delim)


def dedupe(candidates: Iterable[Candidate]) -> List[Candidate]:
    """Drop repeated display texts; the earliest search path wins."""
    seen: set[str] = set()
    out: List[Candidate] = []
    for c in candidates:
        if c.display_text in seen:
            continue
        seen.add(c.display_text)
        out.append(c)
    return out


def complete(
    reference: IncludeReference,
    user_paths: PathSource,
    system_paths: PathSource,
    mode_filter: Optional[ModeFilter] = None,
) -> List[Candidate]:
    """
    Return the header candidates for `reference`, in search-path order and
    alphabetical within each directory. Never raises for a bad path source or
    an unreadable directory: those contribute nothing and are logged.
    """
    mode_filter = mode_filter or default_mode_filter()
    results: List[Candidate] = []
    for directory in search_directories(reference, user_paths, system_paths):
        if not os.path.isdir(directory):
            log.debug("Skipping missing include directory %s", directory)
            continue
        try:
            results.extend(candidates_for(reference, directory, mode_filter))
        except ScanError as e:
            log.warning("%s", e)
    out = dedupe(results)
    log.debug("complete %r -> %d candidates", reference.prefix, len(out))
    return out
