"""Utility modules for jdocminer."""

from .logger import get_logger, Logger

format_executable = Logger.format_executable
format_type_summary = Logger.format_type_summary

from .error_handler import (
    ExtractionError,
    InvariantViolationError,
    MissingInputError,
    SourceParseError,
    ConfigurationError,
    graceful_error,
    report_error
)
from .file_reader import (
    read_file,
    write_file,
    find_java_sources
)

__all__ = [
    'get_logger',
    'Logger',
    'format_executable',
    'format_type_summary',
    'ExtractionError',
    'InvariantViolationError',
    'MissingInputError',
    'SourceParseError',
    'ConfigurationError',
    'graceful_error',
    'report_error',
    'read_file',
    'write_file',
    'find_java_sources',
]
