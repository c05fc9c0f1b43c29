"""Ataxx engine package: search models and the alpha-beta searcher.

The Qt worker bridge lives in :mod:`ataxxie.engine.qt_bridge` and is imported
on demand so that the searcher can be used without a Qt runtime.
"""

from ataxxie.engine.python_search import PythonSearchEngine, choose_move
from ataxxie.engine.search import (
    DEFAULT_DEPTH,
    CancelCheck,
    IEngine,
    SearchLimits,
    SearchResult,
)

DefaultEngine: type[IEngine] = PythonSearchEngine

__all__ = [
    "DEFAULT_DEPTH",
    "CancelCheck",
    "DefaultEngine",
    "IEngine",
    "PythonSearchEngine",
    "SearchLimits",
    "SearchResult",
    "choose_move",
]
