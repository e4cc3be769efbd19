# log_search/errors.py
class LogSearchError(RuntimeError):
    """Base class for errors raised by log_search."""


class SourceReadError(LogSearchError):
    """
    A record source (one Parquet file or the source directory) could not be read.
    The loader logs it and skips the batch.
    """


class NoSourcesError(LogSearchError):
    """
    The source directory holds no Parquet files.
    Fatal at startup: there is nothing to serve.
    """


class EngineSealedError(LogSearchError):
    """Raised when records are ingested after the engine started serving."""
