"""Exception taxonomy for table analysis.

Exceptions are raised inside the readers and analyzers. The
StatisticsGenerator boundary converts them into a failed Result.
"""


class TableStatsError(Exception):
    """Base class for all analysis failures."""


class TableIOError(TableStatsError, OSError):
    """File missing, unreadable, or a read failed outside the sampling path."""


class HeaderError(TableStatsError):
    """The first record (the header) could not be read."""


class EmptyFileError(HeaderError):
    """The file has zero bytes, so there is no header."""


class ConfigError(TableStatsError, ValueError):
    """Sampling configuration is invalid."""


class UnsupportedFormatError(TableStatsError):
    """No working reader exists for the file's format."""
