"""Configuration loader for extraction settings from a YAML file."""

import logging
import yaml
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Any, Optional, List

from jdocminer.config.constants import DEFAULTS, JAVA
from jdocminer.utils.error_handler import ConfigurationError

logger = logging.getLogger(__name__)


@dataclass
class ExtractorConfig:
    """Settings for one extraction run.

    Attributes:
        source_paths: Java files or directories to load
        target_classes: Qualified names to extract; empty means every top-level class
        root_type: Universal root type whose methods are never collected
        fail_on_parse_error: Raise instead of skipping unparsable source files
        encoding: Source file encoding
        output_dir: Directory for JSON artifacts, None to only log results
        output_indent: JSON indentation
        log_level: Logging level name
        log_to_file: Whether to also log to a file
        log_dir: Directory for log files
    """
    source_paths: List[str] = field(default_factory=list)
    target_classes: List[str] = field(default_factory=list)
    root_type: str = JAVA.ROOT_TYPE
    fail_on_parse_error: bool = False
    encoding: str = DEFAULTS.ENCODING
    output_dir: Optional[str] = DEFAULTS.OUTPUT_DIR
    output_indent: int = DEFAULTS.OUTPUT_INDENT
    log_level: str = DEFAULTS.LOG_LEVEL
    log_to_file: bool = False
    log_dir: str = DEFAULTS.LOG_DIR


class ConfigLoader:
    """Load and manage configuration from a YAML file."""

    def __init__(self, config_path: str = DEFAULTS.CONFIG_FILE):
        """Initialize config loader.

        Args:
            config_path: Path to YAML configuration file
        """
        self.config_path = Path(config_path)
        self.config = self._load_config()

    def _load_config(self) -> Dict[str, Any]:
        """Load configuration from YAML file.

        Returns:
            Configuration dictionary (empty for an empty file)

        Raises:
            FileNotFoundError: If config file doesn't exist
            ConfigurationError: If config file is not valid YAML or not a mapping
        """
        if not self.config_path.exists():
            raise FileNotFoundError(f"Config file not found: {self.config_path}")

        with open(self.config_path, 'r', encoding='utf-8') as f:
            try:
                config = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ConfigurationError(
                    f"Invalid YAML in {self.config_path}: {e}",
                    suggestions=["Validate the file with a YAML linter"],
                ) from e

        if config is None:
            return {}
        if not isinstance(config, dict):
            raise ConfigurationError(
                f"Config file {self.config_path} must contain a mapping, "
                f"got {type(config).__name__}")
        return config

    def get_application_config(self) -> Dict[str, Any]:
        return self.config.get('application', {}) or {}

    def get_extraction_config(self) -> Dict[str, Any]:
        return self.config.get('extraction', {}) or {}

    def get_output_config(self) -> Dict[str, Any]:
        return self.config.get('output', {}) or {}

    def get_logging_config(self) -> Dict[str, Any]:
        return self.config.get('logging', {}) or {}

    def get_extractor_config(self) -> ExtractorConfig:
        """Get extraction settings as an ExtractorConfig object.

        Returns:
            ExtractorConfig with values from the file and defaults elsewhere

        Raises:
            ConfigurationError: If the configuration is invalid
        """
        result = self.validate()
        if not result['valid']:
            raise ConfigurationError(
                "Invalid configuration: " + "; ".join(result['errors']),
                suggestions=[f"Fix {self.config_path}"],
            )
        for warning in result['warnings']:
            logger.warning(f"{self.config_path}: {warning}")

        extraction = self.get_extraction_config()
        output = self.get_output_config()
        logging_config = self.get_logging_config()

        return ExtractorConfig(
            source_paths=list(extraction.get('source_paths', []) or []),
            target_classes=list(extraction.get('target_classes', []) or []),
            root_type=extraction.get('root_type', JAVA.ROOT_TYPE),
            fail_on_parse_error=bool(extraction.get('fail_on_parse_error', False)),
            encoding=extraction.get('encoding', DEFAULTS.ENCODING),
            output_dir=output.get('directory', DEFAULTS.OUTPUT_DIR),
            output_indent=output.get('indent', DEFAULTS.OUTPUT_INDENT),
            log_level=logging_config.get(
                'level', self.get_application_config().get('default_log_level', DEFAULTS.LOG_LEVEL)),
            log_to_file=bool(logging_config.get('log_to_file', False)),
            log_dir=logging_config.get('log_dir', DEFAULTS.LOG_DIR),
        )

    def validate(self) -> Dict[str, Any]:
        """Validate configuration and return validation results.

        Returns:
            Dictionary with ``valid``, ``errors`` and ``warnings``
        """
        errors = []
        warnings = []

        extraction = self.get_extraction_config()
        for key in ('source_paths', 'target_classes'):
            value = extraction.get(key)
            if value is not None and not isinstance(value, list):
                errors.append(f"extraction.{key} must be a list")

        if not extraction.get('source_paths'):
            warnings.append("No extraction.source_paths configured")

        root_type = extraction.get('root_type', JAVA.ROOT_TYPE)
        if not isinstance(root_type, str) or not root_type.strip():
            errors.append("extraction.root_type must be a non-empty string")

        indent = self.get_output_config().get('indent', DEFAULTS.OUTPUT_INDENT)
        if not isinstance(indent, int) or indent < 0:
            errors.append("output.indent must be a non-negative integer")

        level = self.get_logging_config().get('level', DEFAULTS.LOG_LEVEL)
        if str(level).upper() not in ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'):
            errors.append(f"logging.level {level!r} is not a valid level")

        return {
            'valid': len(errors) == 0,
            'errors': errors,
            'warnings': warnings
        }
