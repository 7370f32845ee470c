"""Pure ``(document, selection) -> (document', selection')`` transformations."""

from . import column, linear, search
from .search import SearchState

__all__ = ["column", "linear", "search", "SearchState"]
