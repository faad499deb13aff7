"""Command line argument parsing."""

import argparse
from typing import List, Optional

from .constants import DEFAULTS, APP


class ArgumentParserBuilder:
    """Builder for creating argument parser with fluent interface."""

    def __init__(self):
        self.parser = argparse.ArgumentParser(
            prog=APP.NAME,
            description="Extract documented constructors, methods and @throws conditions "
                        "from Javadoc comments in Java source code",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog=self._get_usage_examples()
        )
        self._add_core_arguments()
        self._add_optional_arguments()

    def _add_core_arguments(self) -> None:
        """Add source and target arguments."""
        self.parser.add_argument(
            '--source', '-s',
            dest='sources',
            action='append',
            default=[],
            help='Java source file or directory (repeatable; adds to extraction.source_paths)'
        )

        self.parser.add_argument(
            '--class', '-c',
            dest='classes',
            action='append',
            default=[],
            help='Qualified name of a class to extract (repeatable; default: all top-level classes)'
        )

    def _add_optional_arguments(self) -> None:
        """Add optional configuration arguments."""
        self.parser.add_argument(
            '--output-dir', '-o',
            type=str,
            default=None,
            help=f'Directory for JSON output (default: {DEFAULTS.OUTPUT_DIR})'
        )

        self.parser.add_argument(
            '--config',
            type=str,
            default=None,
            help=f'YAML configuration file (e.g. {DEFAULTS.CONFIG_FILE})'
        )

        self.parser.add_argument(
            '--log-level',
            type=str,
            choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
            default=None,
            help=f'Logging level (default: {DEFAULTS.LOG_LEVEL})'
        )

        self.parser.add_argument(
            '--fail-on-parse-error',
            action='store_true',
            help='Stop on the first Java file that cannot be parsed'
        )

        self.parser.add_argument(
            '--version', '-V',
            action='version',
            version=APP.VERSION
        )

    def _get_usage_examples(self) -> str:
        """Get formatted usage examples."""
        return """
Examples:
  # Extract every class under a source tree
  jdocminer --source src/main/java --output-dir output

  # Extract a single class with debug logging
  jdocminer -s src/main/java -c org.jgrapht.graph.AbstractGraph --log-level DEBUG

  # Use settings from a configuration file
  jdocminer --config config/config.yaml
        """

    def build(self) -> argparse.ArgumentParser:
        """Build and return the configured parser."""
        return self.parser


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments using builder pattern."""
    parser = ArgumentParserBuilder().build()
    return parser.parse_args(argv)
