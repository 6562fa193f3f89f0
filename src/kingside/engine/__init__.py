"""Chess engine package: move search on top of the core rules."""

from kingside.engine.search import IEngine, SearchLimits, SearchResult
from kingside.engine.shallow_search import ShallowSearchEngine

DefaultEngine: type[IEngine] = ShallowSearchEngine

__all__ = [
    "DefaultEngine",
    "IEngine",
    "SearchLimits",
    "SearchResult",
    "ShallowSearchEngine",
]
