"""Include-directive header completion (fast, request-scoped, no caching)."""
from __future__ import annotations

from .models import Candidate, Delimiter, IncludeReference, ModeFilter, PostCompletion
from .errors import HdrCompleteError, ConfigurationError, UnsupportedModeError, ScanError
from .paths import resolve, env_path_source
from .parser import parse, extract_prefix
from .scanner import scan
from .search import complete
from .sysinc import default_system_paths, system_path_source
from .engine import Engine

__all__ = [
    "Candidate", "Delimiter", "IncludeReference", "ModeFilter", "PostCompletion",
    "HdrCompleteError", "ConfigurationError", "UnsupportedModeError", "ScanError",
    "resolve", "env_path_source", "parse", "extract_prefix", "scan", "complete",
    "default_system_paths", "system_path_source", "Engine",
]
