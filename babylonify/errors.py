"""Error types raised by the language filter pipeline."""


class BabylonifyError(Exception):
    """Base class for failures reported to the user by the CLI."""


class UsageError(BabylonifyError):
    """Invalid invocation detected before any file I/O."""


class UnknownLanguageError(UsageError, ValueError):
    """Target language value did not match any supported language."""


class PathError(BabylonifyError):
    """Input or output path does not have the expected type."""


class ColumnError(BabylonifyError):
    """Text column is missing or does not hold UTF-8 strings."""


class EmptyInputError(BabylonifyError):
    """Directory mode found no table files to process."""


class TableIOError(BabylonifyError):
    """Reading or writing a table file failed."""
