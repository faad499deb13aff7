"""Source and artifact file helpers with error handling."""

from pathlib import Path
from typing import Optional, List, Iterable
import logging

logger = logging.getLogger(__name__)

JAVA_SUFFIX = ".java"


def read_file(file_path: str, encoding: str = 'utf-8') -> Optional[str]:
    """Read file content, logging instead of raising on failure.

    Args:
        file_path: Path to the file
        encoding: File encoding (default: utf-8)

    Returns:
        File content as string, or None if the file cannot be read
    """
    path = Path(file_path)
    if not path.is_file():
        logger.error(f"Not a readable file: {file_path}")
        return None

    try:
        content = path.read_text(encoding=encoding)
    except UnicodeDecodeError as e:
        logger.error(f"Encoding error reading {file_path}: {e}")
        return None
    except OSError as e:
        logger.error(f"Cannot read {file_path}: {e}")
        return None

    logger.debug(f"Read {len(content)} characters from {file_path}")
    return content


def write_file(file_path: str, content: str, encoding: str = 'utf-8') -> bool:
    """Write content to a file, creating parent directories.

    Args:
        file_path: Path to the file
        content: Content to write
        encoding: File encoding (default: utf-8)

    Returns:
        True if successful, False otherwise
    """
    path = Path(file_path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding=encoding)
    except OSError as e:
        logger.error(f"Cannot write {file_path}: {e}")
        return False

    logger.debug(f"Wrote {len(content)} characters to {file_path}")
    return True


def find_java_sources(paths: Iterable[str]) -> List[Path]:
    """Expand files and directories into a sorted list of Java source files.

    Args:
        paths: Java files or directories searched recursively

    Returns:
        De-duplicated Java source paths in a stable order

    Raises:
        FileNotFoundError: If a path does not exist
    """
    sources = set()
    for raw in paths:
        path = Path(raw)
        if not path.exists():
            raise FileNotFoundError(str(path))
        if path.is_dir():
            sources.update(p for p in path.rglob(f"*{JAVA_SUFFIX}") if p.is_file())
        elif path.suffix == JAVA_SUFFIX:
            sources.add(path)
        else:
            logger.warning(f"Skipping non-Java file: {path}")
    return sorted(sources)
