"""Module-level engine shared by the Flask app (initialize once, query many)."""
from __future__ import annotations
from hdrcomplete import Engine
from hdrcomplete import config as CFG
from hdrcomplete.models import Candidate

_engine: Engine | None = None

def initialize(mode: str = CFG.DEFAULT_MODE,
               user_paths: list[str] | None = None,
               system_paths: list[str] | None = None,
               verbose: bool = False) -> Engine:
    """
    Create the shared engine. Paths left as None use the environment
    (HDRCOMPLETE_USER_PATH / HDRCOMPLETE_SYSTEM_PATH) or built-in defaults.
    """
    global _engine
    _engine = Engine(mode, user_paths=user_paths, system_paths=system_paths, verbose=verbose)
    return _engine

def get_engine() -> Engine:
    if _engine is None:
        raise RuntimeError("Engine not initialized. Call initialize(...) first.")
    return _engine

def complete(line: str) -> list[Candidate]:
    """Candidates for the text before the cursor (list[Candidate])."""
    return get_engine().complete_line(line)
