from __future__ import annotations
import enum
import os
import re
from dataclasses import dataclass, asdict
from typing import Optional


class Delimiter(enum.Enum):
    QUOTE = '"'
    ANGLE = "<"

    @property
    def opening(self) -> str:
        return self.value

    @property
    def closing(self) -> str:
        return '"' if self is Delimiter.QUOTE else ">"

    @classmethod
    def from_char(cls, ch: str) -> "Delimiter":
        return cls(ch)


@dataclass(frozen=True)
class IncludeReference:
    delimiter: Delimiter
    raw_prefix: str                   # text after the delimiter, up to the cursor
    subdirectory: Optional[str]       # "foo/bar" for `<foo/bar/baz`, None without '/'
    filename_fragment: str            # partial name after the last '/'

    @property
    def prefix(self) -> str:
        """The text a host replaces when a candidate is chosen."""
        return self.delimiter.opening + self.raw_prefix


@dataclass(frozen=True)
class Candidate:
    display_text: str         # delimiter + relative path, e.g. '"foo/bar.h'
    source_directory: str     # absolute directory the entry was listed from
    is_directory: bool = False

    @property
    def relative_path(self) -> str:
        return self.display_text[1:]

    @property
    def name(self) -> str:
        """Final path segment, without the trailing '/' of directories."""
        return self.relative_path.rstrip("/").rsplit("/", 1)[-1]

    @property
    def file_location(self) -> str:
        return os.path.join(self.source_directory, self.name)

    def to_dict(self) -> dict:
        d = asdict(self)
        d["file_location"] = self.file_location
        return d


@dataclass(frozen=True)
class ModeFilter:
    mode: str
    pattern: re.Pattern

    @classmethod
    def compile(cls, mode: str, regex: str) -> "ModeFilter":
        return cls(mode, re.compile(regex))

    def matches(self, name: str) -> bool:
        return self.pattern.search(name) is not None


@dataclass(frozen=True)
class PostCompletion:
    insert: str = ""            # closing delimiter to insert at point
    move_to_eol: bool = False   # closing delimiter already present
    requery: bool = False       # a directory was completed; ask again

    def to_dict(self) -> dict:
        return asdict(self)
