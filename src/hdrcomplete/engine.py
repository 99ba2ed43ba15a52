# hdrcomplete/engine.py
from __future__ import annotations

import os
import re
import logging
from typing import Dict, List, Mapping, Optional, Tuple, Union

from . import config as CFG
from .models import Candidate, IncludeReference, ModeFilter, PostCompletion
from .parser import parse, extract_prefix
from .paths import PathSource, env_path_source
from .search import complete
from .sysinc import system_path_source
from .errors import UnsupportedModeError

log = logging.getLogger(__name__)


class Engine:
    """
    Completion backend for one editing mode.

    Exposes the operations an editor host calls while completing an include
    directive:
      * prefix(line):            the partial `"path` / `<path` being typed, or None
      * candidates(prefix):      header/directory candidates, search-path order
      * meta(candidate):         the directory the candidate was found under
      * location(candidate):     (file, line) to jump to
      * post_completion(...):    what to insert after a candidate is accepted

    Path sources are either lists of directories or zero-argument callables
    returning one; they are resolved on every query, never cached.
    """

    # ------------- lifecycle -------------

    def __init__(
        self,
        mode: str = CFG.DEFAULT_MODE,
        *,
        user_paths: Optional[PathSource] = None,
        system_paths: Optional[PathSource] = None,
        mode_filters: Optional[Mapping[str, Union[str, re.Pattern]]] = None,
        verbose: bool = False,
    ) -> None:
        if verbose or os.environ.get(CFG.VERBOSE_ENV) == "1":
            logging.basicConfig(level=logging.INFO)

        self._filters: Dict[str, ModeFilter] = {
            m: ModeFilter(m, p if isinstance(p, re.Pattern) else re.compile(p))
            for m, p in (mode_filters if mode_filters is not None else CFG.DEFAULT_MODE_FILTERS).items()
        }
        if mode not in self._filters:
            raise UnsupportedModeError(mode, self._filters)
        self.mode = mode
        self.user_paths: PathSource = (
            user_paths if user_paths is not None
            else env_path_source(CFG.USER_PATH_ENV, CFG.DEFAULT_USER_PATHS)
        )
        self.system_paths: PathSource = (
            system_paths if system_paths is not None
            else env_path_source(CFG.SYSTEM_PATH_ENV, system_path_source())
        )
        log.info("Engine ready: mode=%s", mode)

    def modes(self) -> List[str]:
        return sorted(self._filters)

    def supports(self, mode: str) -> bool:
        return mode in self._filters

    @property
    def mode_filter(self) -> ModeFilter:
        return self._filters[self.mode]

    # ------------- completion -------------

    def prefix(self, line: str) -> Optional[str]:
        return extract_prefix(line)

    def candidates(self, prefix: str) -> List[Candidate]:
        """Accepts a bare prefix ('"foo/b') or the whole line before the cursor."""
        ref = parse(prefix) if prefix.startswith("#") else parse(f"#include {prefix}")
        if ref is None:
            return []
        return self.complete_reference(ref)

    def complete_reference(self, ref: IncludeReference) -> List[Candidate]:
        return complete(ref, self.user_paths, self.system_paths, self.mode_filter)

    def complete_line(self, line: str) -> List[Candidate]:
        ref = parse(line)
        return self.complete_reference(ref) if ref else []

    # ------------- candidate info -------------

    def meta(self, candidate: Candidate) -> str:
        return candidate.source_directory

    def location(self, candidate: Candidate) -> Tuple[str, int]:
        return candidate.file_location, 1

    # /* ~~~ close the directive unless a directory was completed ~~~ */
    def post_completion(self, candidate: Union[Candidate, str], text_after_cursor: str = "") -> PostCompletion:
        text = candidate.display_text if isinstance(candidate, Candidate) else candidate
        ref = parse(f"#include {text}")
        if ref is None:
            return PostCompletion()
        if text.endswith("/"):
            return PostCompletion(requery=True)
        closing = ref.delimiter.closing
        if text_after_cursor.startswith(closing):
            return PostCompletion(move_to_eol=True)
        return PostCompletion(insert=closing)
