# log_search/__init__.py

from .datastore import Record, RecordStore
from .inverted_index import InvertedIndex
from .preprocess import tokenize
from .ranking import rank
from .search_engine import SearchEngine, SearchResponse

__version__ = "0.1.0"

__all__ = [
    "Record", "RecordStore",
    "InvertedIndex",
    "tokenize",
    "rank",
    "SearchEngine", "SearchResponse",
]
