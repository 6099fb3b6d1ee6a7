"""Full error hierarchy for the blocktree package.

Every public error class inherits from BlockTreeError. Each carries a
machine-readable ``code`` (from :class:`ErrorCode`), a human-readable
``message``, an optional structured ``context`` dict, and an optional
``cause`` (chained exception).

Degenerate input (empty blocks, missing reference targets, unmapped block
names) is never reported through this hierarchy; the converter handles it
by omission or fallback.  Exceptions raised by caller-supplied
collaborators are not wrapped and reach the caller unchanged.

Error codes are defined as a :class:`str` enum so that they serialise
naturally to JSON and can be matched with simple ``==`` comparisons.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

# ---------------------------------------------------------------------------
# Error code enum
# ---------------------------------------------------------------------------

class ErrorCode(str, Enum):
    """Machine-readable error codes for every error the package can raise."""

    CONVERSION_ERROR = "CONVERSION_ERROR"
    MALFORMED_BLOCK = "MALFORMED_BLOCK"
    REFERENCE_CYCLE = "REFERENCE_CYCLE"
    REGISTRY_ERROR = "REGISTRY_ERROR"
    REMOTE_ERROR = "REMOTE_ERROR"
    NETWORK_ERROR = "NETWORK_ERROR"
    RETRY_EXHAUSTED = "RETRY_EXHAUSTED"


# ---------------------------------------------------------------------------
# Base error
# ---------------------------------------------------------------------------

class BlockTreeError(Exception):
    """Base exception for all blocktree errors.

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

class BlockTreeConversionError(BlockTreeError):
    """Base class for errors raised while converting blocks to components.

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


class BlockTreeMalformedBlockError(BlockTreeConversionError):
    """A raw block record is missing fields required for classification.

    Context keys: ``field``, ``expected``, ``actual``, ``block_name``.
    """

    def __init__(
        self,
        message: str,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(
            code=ErrorCode.MALFORMED_BLOCK,
            message=message,
            context=context,
            cause=cause,
        )


class BlockTreeReferenceCycleError(BlockTreeConversionError):
    """A reference block points back at content already being expanded.

    Only raised when ``ConverterConfig.detect_reference_cycles`` is set.

    Context keys: ``ref``, ``path``.
    """

    def __init__(
        self,
        message: str,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(
            code=ErrorCode.REFERENCE_CYCLE,
            message=message,
            context=context,
            cause=cause,
        )


class BlockTreeRegistryError(BlockTreeError):
    """A component factory could not be registered.

    Context keys: ``name``, ``factory``.
    """

    def __init__(
        self,
        message: str,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(
            code=ErrorCode.REGISTRY_ERROR,
            message=message,
            context=context,
            cause=cause,
        )


# ---------------------------------------------------------------------------
# Remote reference errors
# ---------------------------------------------------------------------------

class BlockTreeRemoteError(BlockTreeError):
    """The content API rejected a reference lookup with a non-retryable
    status.

    Context keys: ``status_code``, ``ref``, ``body``.
    """

    def __init__(
        self,
        message: str,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(
            code=ErrorCode.REMOTE_ERROR,
            message=message,
            context=context,
            cause=cause,
        )


class BlockTreeNetworkError(BlockTreeError):
    """A transport-level failure occurred (timeout, DNS, connection reset).

    Context keys: ``url``, ``attempt``.
    """

    def __init__(
        self,
        message: str,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(
            code=ErrorCode.NETWORK_ERROR,
            message=message,
            context=context,
            cause=cause,
        )


class BlockTreeRetryExhaustedError(BlockTreeError):
    """All retry attempts for a reference lookup were used up.

    Context keys: ``attempts``, ``last_status``, ``ref``.
    """

    def __init__(
        self,
        message: str,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(
            code=ErrorCode.RETRY_EXHAUSTED,
            message=message,
            context=context,
            cause=cause,
        )
