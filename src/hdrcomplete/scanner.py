# hdrcomplete/scanner.py
from __future__ import annotations

import os
import logging
from typing import List

from .models import Candidate, ModeFilter
from .errors import ScanError

log = logging.getLogger(__name__)

_SPECIAL = (".", "..")


def scan(directory: str, name_fragment: str, mode_filter: ModeFilter, *, display_prefix: str = "") -> List[Candidate]:
    """
    List `directory` and return the entries starting with `name_fragment`
    that are either directories or match `mode_filter`.

    Directories come back with a trailing '/' and is_directory=True. Results
    are sorted by codepoint order of the entry text and prefixed with
    `display_prefix` (the delimiter plus any subdirectory already typed).
    Raises ScanError if the directory cannot be listed.
    """
    source = os.path.abspath(directory)
    found: List[tuple[str, bool]] = []
    try:
        with os.scandir(source) as it:
            for entry in it:
                name = entry.name
                if name in _SPECIAL or not name.startswith(name_fragment):
                    continue
                if entry.is_dir():
                    found.append((name + "/", True))
                elif mode_filter.matches(name):
                    found.append((name, False))
    except OSError as e:
        raise ScanError(source, e) from e

    found.sort(key=lambda item: item[0])
    log.debug("scan %s fragment=%r -> %d entries", source, name_fragment, len(found))
    return [Candidate(display_prefix + text, source, is_dir) for text, is_dir in found]
