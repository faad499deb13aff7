"""Emission of documented types to logs and JSON artifacts."""

import json
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List, Optional
import logging

from jdocminer.config.constants import APP, DEFAULTS
from jdocminer.data_models import DocumentedType
from jdocminer.utils import format_executable, format_type_summary, write_file
from jdocminer.utils.error_handler import ExtractionError

logger = logging.getLogger(__name__)


class OutputPrinter(ABC):
    """Receives each documented type once its extraction has completed."""

    @abstractmethod
    def print(self, documented_type: DocumentedType) -> None:
        """Emit one documented type."""


class JsonOutputPrinter(OutputPrinter):
    """Logs documented types and writes each one to ``<output_dir>/<qualified name>.json``."""

    def __init__(self, output_dir: Optional[str] = None, indent: int = DEFAULTS.OUTPUT_INDENT):
        """Initialize the printer.

        Args:
            output_dir: Directory for JSON artifacts; None only logs
            indent: JSON indentation
        """
        self.output_dir = Path(output_dir) if output_dir else None
        self.indent = indent
        self.written: List[Path] = []

    def print(self, documented_type: DocumentedType) -> None:
        logger.info(f"Extracted {format_type_summary(documented_type)}")
        for executable in documented_type.executables:
            logger.debug(f"  {format_executable(executable)}")

        if self.output_dir is None:
            return
        path = self.output_dir / f"{documented_type.declared_type.qualified_name}.json"
        if not write_file(str(path), self.render(documented_type)):
            raise ExtractionError(
                f"Cannot write extraction output to {path}",
                suggestions=["Check that the output directory is writable"],
                error_code="E_OUTPUT",
            )
        self.written.append(path)
        logger.info(f"Wrote {path}")

    def render(self, documented_type: DocumentedType) -> str:
        """Serialize a documented type to the versioned JSON artifact format."""
        return json.dumps(self.artifact(documented_type), indent=self.indent,
                          ensure_ascii=False) + "\n"

    @staticmethod
    def artifact(documented_type: DocumentedType) -> Dict[str, Any]:
        return {
            'format_version': APP.OUTPUT_FORMAT_VERSION,
            'generator': APP.VERSION,
            **documented_type.to_dict(),
        }
