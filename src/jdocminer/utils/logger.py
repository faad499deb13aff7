"""Logging utility for jdocminer."""

import logging
import sys
from pathlib import Path
from datetime import datetime
from typing import Optional, Any


class Logger:
    """Centralized logging utility."""

    _instance: Optional[logging.Logger] = None

    @classmethod
    def get_logger(cls, name: str = "jdocminer",
                   level: str = "INFO",
                   log_to_file: bool = False,
                   log_dir: str = "logs") -> logging.Logger:
        """Get or create the application logger.

        Args:
            name: Logger name; module loggers under ``jdocminer.*`` propagate to it
            level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
            log_to_file: Whether to also log to a timestamped file
            log_dir: Directory for log files

        Returns:
            Configured logger instance
        """
        if cls._instance is not None:
            return cls._instance

        logger = logging.getLogger(name)
        logger.setLevel(getattr(logging, level.upper()))
        logger.handlers.clear()

        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )

        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(getattr(logging, level.upper()))
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

        if log_to_file:
            log_path = Path(log_dir)
            log_path.mkdir(parents=True, exist_ok=True)

            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            log_file = log_path / f"jdocminer_{timestamp}.log"

            file_handler = logging.FileHandler(log_file, encoding='utf-8')
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

            logger.info(f"Logging to file: {log_file}")

        cls._instance = logger
        return logger

    @classmethod
    def reset(cls):
        """Reset the logger instance."""
        cls._instance = None

    @classmethod
    def format_executable(cls, executable: Any, max_length: int = 120) -> str:
        """Format a documented executable for logging."""
        if executable is None:
            return "<none>"
        signature = getattr(executable, "signature", "")
        if len(signature) > max_length:
            signature = signature[:max_length] + "..."

        parts = [signature]
        return_type = getattr(executable, "return_type", None)
        parts.append(f"returns={return_type}" if return_type else "constructor")
        throws_tags = getattr(executable, "throws_tags", ())
        if throws_tags:
            names = ",".join(t.exception_type.display_name for t in throws_tags)
            parts.append(f"throws={names}")
        if getattr(executable, "is_varargs", False):
            parts.append("varargs")
        return " | ".join(parts)

    @classmethod
    def format_type_summary(cls, documented_type: Any) -> str:
        """Format a documented type summary for logging."""
        if documented_type is None:
            return "<no type>"
        executables = getattr(documented_type, "executables", ())
        constructors = sum(1 for e in executables if e.is_constructor)
        throws = sum(len(e.throws_tags) for e in executables)
        return (
            f"{documented_type.declared_type} "
            f"constructors={constructors} "
            f"methods={len(executables) - constructors} "
            f"throws_tags={throws}"
        )


def get_logger(name: str = "jdocminer", **kwargs) -> logging.Logger:
    """Convenience function to get the application logger.

    Args:
        name: Logger name
        **kwargs: Additional arguments for Logger.get_logger()

    Returns:
        Logger instance
    """
    return Logger.get_logger(name, **kwargs)
