"""Exception hierarchy for puzzle loading, configuration and counting."""

from typing import Any, Mapping, Optional


class GridEnhanceError(Exception):
    """Root of every error raised by grid_enhance.

    ``details`` is a private copy of the context passed in (line, column,
    offending size), so callers can inspect it without string parsing.
    """

    message: str
    details: dict[str, Any]

    def __init__(self, message: str, details: Optional[Mapping[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = dict(details) if details else {}


class ConfigurationError(GridEnhanceError, ValueError):
    """Raised when a config dataclass is constructed with invalid values."""

    def __init__(
        self,
        config_key: str,
        message: str,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(
            message=f"Configuration error for '{config_key}': {message}",
            details=details,
        )
        self.config_key = config_key


class PuzzleFormatError(GridEnhanceError, ValueError):
    """Raised when puzzle input does not follow the expected text format.

    This includes:
    - Missing enhancement table line
    - Enhancement table that is not exactly 512 symbols
    - Missing or non-blank separator line
    - Unknown symbols or ragged rows (strict parsing only)
    """

    def __init__(
        self,
        message: str,
        line: Optional[int] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        details = dict(details or {})
        if line is not None:
            details["line"] = line
            message = f"line {line}: {message}"
        super().__init__(message=message, details=details)
        self.line = line


class InvalidTableError(PuzzleFormatError):
    """Raised when an enhancement table does not have exactly 512 entries."""

    def __init__(self, size: int, expected: int):
        super().__init__(
            f"enhancement table must have {expected} entries, got {size}",
            details={"size": size, "expected": expected},
        )
        self.size = size


class PuzzleLoadError(GridEnhanceError):
    """Raised when a puzzle source cannot be read."""

    def __init__(self, source: str, reason: str):
        super().__init__(
            message=f"failed to load puzzle from {source!r}: {reason}",
            details={"source": source},
        )
        self.source = source


class InfiniteCountError(GridEnhanceError):
    """Raised when counting lit pixels while the infinite background is lit."""

    def __init__(self, tracked_lit: int):
        super().__init__(
            message=(
                "lit pixel count is infinite: the background is lit; "
                "use count_tracked_lit() to count stored pixels only"
            ),
            details={"tracked_lit": tracked_lit},
        )
        self.tracked_lit = tracked_lit
