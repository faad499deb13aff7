"""Extraction errors and user guidance for command line failures."""

import logging
import traceback
from typing import Optional, List, Any
from functools import wraps

logger = logging.getLogger(__name__)


class ExtractionError(Exception):
    """Base error carrying a message, suggested fixes and an error code."""

    error_code_default: Optional[str] = None

    def __init__(self, message: str, suggestions: Optional[List[str]] = None,
                 error_code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.suggestions = suggestions or []
        self.error_code = error_code or self.error_code_default


class InvariantViolationError(ExtractionError):
    """A collected raw tag is not of the expected kind.

    This means the tag collection upstream was not restricted to throws tags;
    extraction of the enclosing type must be aborted.
    """

    error_code_default = "E_INVARIANT"

    def __init__(self, member_signature: str, tag_index: int, tag: Any):
        super().__init__(
            f"Tag #{tag_index} of {member_signature} is not a @throws tag: {tag!r}. "
            f"Only @throws and @exception tags may be collected for exception documentation.",
            suggestions=["Check that the DocTree provider builds ThrowsTagDoc "
                         "objects for every @throws and @exception tag"],
        )
        self.member_signature = member_signature
        self.tag_index = tag_index
        self.tag = tag


class MissingInputError(ExtractionError):
    """A required input (target type or member) is absent."""

    error_code_default = "E_MISSING_INPUT"


class SourceParseError(ExtractionError):
    """A Java source file could not be read or parsed."""

    error_code_default = "E_SOURCE_PARSE"

    def __init__(self, file_path: str, reason: str):
        super().__init__(
            f"Cannot parse {file_path}: {reason}",
            suggestions=["Check that the file compiles with javac",
                         "Disable fail_on_parse_error to skip unparsable files"],
        )
        self.file_path = file_path
        self.reason = reason


class ConfigurationError(ExtractionError):
    """Invalid configuration values."""

    error_code_default = "E_CONFIG"


def report_error(error: ExtractionError) -> None:
    """Print an extraction error and its suggested fixes for the user."""
    code = f" [{error.error_code}]" if error.error_code else ""
    print(f"\n❌ {error.message}{code}")
    if error.suggestions:
        print("\n💡 Suggestions:")
        for suggestion in error.suggestions:
            print(f"   - {suggestion}")
    print()


def graceful_error(func):
    """Decorator turning common environment failures into ExtractionErrors."""
    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except FileNotFoundError as e:
            raise ExtractionError(
                f"File not found: {e}",
                suggestions=["Check the --source and --config paths",
                             "Paths are resolved relative to the working directory"],
                error_code="E_NOT_FOUND",
            ) from e
        except ExtractionError:
            raise
        except Exception as e:
            logger.error(f"{func.__name__} failed: {e}")
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug(traceback.format_exc())
            raise
    return wrapper
