"""Error hierarchy for the adfify converter.

Every public error class inherits from AdfifyError. Each carries a
machine-readable ``code`` (from :class:`ErrorCode`), a human-readable
``message``, an optional structured ``context`` dict, and an optional
``cause`` (chained exception).

The engine itself is lenient: unknown token types are dropped rather than
reported.  Errors are only raised when the input token tree violates a
structural precondition or when a configured limit is exceeded.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

# ---------------------------------------------------------------------------
# Error code enum
# ---------------------------------------------------------------------------

class ErrorCode(str, Enum):
    """Machine-readable error codes for every error the converter can raise."""

    CONVERSION_ERROR = "CONVERSION_ERROR"
    MALFORMED_TOKEN = "MALFORMED_TOKEN"
    NESTING_DEPTH_EXCEEDED = "NESTING_DEPTH_EXCEEDED"


# ---------------------------------------------------------------------------
# Base error
# ---------------------------------------------------------------------------

class AdfifyError(Exception):
    """Base exception for all adfify errors.

    Parameters
    ----------
    code:
        A value from :class:`ErrorCode` (or any string) identifying the
        error category.
    message:
        A developer-friendly description of what went wrong.
    context:
        Arbitrary structured data providing extra diagnostic detail.
        Keys and expected types are documented per subclass.
    cause:
        The underlying exception, if this error wraps another.
    """

    def __init__(
        self,
        code: str,
        message: str,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.code: str = code
        self.message: str = message
        self.context: dict[str, Any] = context or {}
        self.cause: Exception | None = cause
        super().__init__(message)
        if cause is not None:
            self.__cause__ = cause

    def __repr__(self) -> str:
        ctx = f", context={self.context!r}" if self.context else ""
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r}{ctx})"


# ---------------------------------------------------------------------------
# Conversion errors
# ---------------------------------------------------------------------------

class AdfifyConversionError(AdfifyError):
    """Base class for errors during Markdown-to-ADF conversion.

    Context varies by subclass.
    """

    def __init__(
        self,
        code: str = ErrorCode.CONVERSION_ERROR,
        message: str = "Conversion error",
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(
            code=code,
            message=message,
            context=context,
            cause=cause,
        )


class AdfifyMalformedTokenError(AdfifyConversionError):
    """The input token tree is missing a field the engine relies on
    (for example a ``list`` token without ``items``).

    Context keys: ``error_type``, ``detail``.
    """

    def __init__(
        self,
        message: str,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(
            code=ErrorCode.MALFORMED_TOKEN,
            message=message,
            context=context,
            cause=cause,
        )


class AdfifyNestingDepthError(AdfifyConversionError):
    """Container nesting (block quotes and lists) exceeded the configured
    ``max_nesting_depth``.

    Context keys: ``depth``, ``limit``, ``token_type``.
    """

    def __init__(
        self,
        message: str,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(
            code=ErrorCode.NESTING_DEPTH_EXCEEDED,
            message=message,
            context=context,
            cause=cause,
        )
