# hdrcomplete/parser.py
from __future__ import annotations

import re
from typing import Optional

from .models import Delimiter, IncludeReference

# /* ~~~ `#  include <partial` anchored at column 0, running to the cursor ~~~ */
INCLUDE_DECLARATION = re.compile(
    r'\A#[ \t]*(?:include|import)[ \t]+'
    r'(?:(?P<quote>")(?P<qpath>[^"]*)|(?P<angle><)(?P<apath>[^>]*))\Z'
)


def parse(line_text_before_cursor: str) -> Optional[IncludeReference]:
    """
    Parse the text before the cursor as a partially typed include directive.
    Returns None when the line is not one (the normal "no completion" case).
    """
    m = INCLUDE_DECLARATION.match(line_text_before_cursor)
    if not m:
        return None
    if m.group("quote"):
        delim, raw = m.group("quote"), m.group("qpath")
    else:
        delim, raw = m.group("angle"), m.group("apath")
    subdir, slash, fragment = raw.rpartition("/")
    return IncludeReference(
        delimiter=Delimiter.from_char(delim),
        raw_prefix=raw,
        subdirectory=subdir if slash else None,
        filename_fragment=fragment,
    )


def extract_prefix(line_text_before_cursor: str) -> Optional[str]:
    """The delimiter plus the partial path, e.g. '"foo/ba'; None if not an include."""
    ref = parse(line_text_before_cursor)
    return ref.prefix if ref else None
