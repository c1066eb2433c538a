"""Module errors: structured error taxonomy for tlsfindings."""
#
# PURPOSE:
# Gives every failure path of the report pipeline an error code, a typed
# exception and a process exit code, so the CLI can report problems
# consistently.
#
# ERROR CODE FORMAT:
# - INPUT_XXX: Reading the scan output
# - PARSE_XXX: Streaming parser state
# - ACC_XXX: Finding accumulator
# - CONFIG_XXX: Configuration errors
# - SYSTEM_XXX: Anything else
#
# USAGE:
#   from tlsfindings.errors import ReportError, ErrorCode
#
#   raise ReportError(
#       ErrorCode.INPUT_NOT_FOUND,
#       "Scan output does not exist",
#       details={"path": "scan.txt"}
#   )
#
from enum import Enum
from typing import Any, Dict, Optional


class ErrorCode(Enum):
    # Input Errors
    INPUT_NOT_FOUND = "INPUT_001"
    INPUT_UNREADABLE = "INPUT_002"

    # Parser Errors
    PARSE_NO_HOST_CONTEXT = "PARSE_001"

    # Accumulator Errors
    ACCUMULATOR_SEALED = "ACC_001"

    # Config Errors
    CONFIG_INVALID = "CONFIG_001"

    # System Errors
    SYSTEM_INTERNAL_ERROR = "SYSTEM_001"


class ReportError(Exception):
    """
    Base exception class for tlsfindings with structured error information.

    Attributes:
        code: ErrorCode enum value (e.g., "INPUT_001")
        message: Human-readable error message
        details: Optional dictionary with additional context
        exit_code: Process exit status the CLI uses for this error
    """

    # Map error codes to process exit codes
    EXIT_CODE_MAP: Dict[ErrorCode, int] = {
        ErrorCode.INPUT_NOT_FOUND: 2,
        ErrorCode.INPUT_UNREADABLE: 2,
        ErrorCode.CONFIG_INVALID: 3,
        ErrorCode.PARSE_NO_HOST_CONTEXT: 1,
        ErrorCode.ACCUMULATOR_SEALED: 1,
        ErrorCode.SYSTEM_INTERNAL_ERROR: 1,
    }

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        details: Optional[Dict[str, Any]] = None,
        exit_code: Optional[int] = None
    ):
        self.code = code
        self.message = message
        self.details = details or {}
        self.exit_code = exit_code if exit_code is not None else self.EXIT_CODE_MAP.get(code, 1)

        # Keep the code in the message so it is searchable in logs
        super().__init__(f"[{code.value}] {message}")

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert error to a dictionary (used for structured log records).

        Returns:
            Dictionary with code, message, details and exit_code
        """
        return {
            "code": self.code.value,
            "message": self.message,
            "details": self.details,
            "exit_code": self.exit_code
        }


# ============================================================================
# Convenience Functions
# ============================================================================

def handle_error(error: Exception, context: Optional[str] = None) -> ReportError:
    """
    Convert a generic exception to a ReportError.

    Args:
        error: The original exception
        context: Optional context string (e.g., "while reading scan output")

    Returns:
        ReportError with appropriate code and message
    """
    if isinstance(error, ReportError):
        return error

    error_type = type(error).__name__

    if isinstance(error, FileNotFoundError):
        code = ErrorCode.INPUT_NOT_FOUND
    elif isinstance(error, (PermissionError, IsADirectoryError, UnicodeError)):
        code = ErrorCode.INPUT_UNREADABLE
    elif isinstance(error, OSError):
        code = ErrorCode.INPUT_UNREADABLE
    else:
        code = ErrorCode.SYSTEM_INTERNAL_ERROR

    message = str(error)
    if context:
        message = f"{context}: {message}"

    return ReportError(
        code=code,
        message=message,
        details={
            "original_type": error_type,
            "original_message": str(error)
        }
    )


__all__ = ["ErrorCode", "ReportError", "handle_error"]
