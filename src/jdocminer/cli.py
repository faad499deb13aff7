"""Command-line interface for jdocminer."""

import sys
import argparse
from typing import List, Optional

from jdocminer.config import parse_arguments, APP
from jdocminer.doctree import JavaSourceProvider
from jdocminer.extractor import JavadocExtractor
from jdocminer.output import JsonOutputPrinter
from jdocminer.utils import (
    get_logger,
    graceful_error,
    report_error,
    ExtractionError,
    MissingInputError,
)
from jdocminer.utils.config_loader import ConfigLoader, ExtractorConfig


def build_config(args: argparse.Namespace) -> ExtractorConfig:
    """Merge the configuration file (if any) with command line overrides.

    Raises:
        FileNotFoundError: If the configuration file does not exist
        ConfigurationError: If the configuration file is invalid
    """
    config = ConfigLoader(args.config).get_extractor_config() if args.config else ExtractorConfig()

    config.source_paths = list(config.source_paths) + list(args.sources)
    if args.classes:
        config.target_classes = list(args.classes)
    if args.output_dir is not None:
        config.output_dir = args.output_dir
    if args.log_level is not None:
        config.log_level = args.log_level
    if args.fail_on_parse_error:
        config.fail_on_parse_error = True
    return config


@graceful_error
def run(config: ExtractorConfig) -> int:
    """Load sources, extract the target classes and write the results.

    Returns:
        Exit status: success unless some class failed to extract
    """
    logger = get_logger(level=config.log_level, log_to_file=config.log_to_file,
                        log_dir=config.log_dir)

    if not config.source_paths:
        raise ExtractionError(
            "No Java sources given",
            suggestions=["Pass --source <dir>", "Or set extraction.source_paths in the config file"],
            error_code="E_NO_SOURCES",
        )

    provider = JavaSourceProvider(encoding=config.encoding,
                                  fail_on_parse_error=config.fail_on_parse_error)
    provider.load(config.source_paths)

    if config.target_classes:
        targets = []
        for name in config.target_classes:
            class_doc = provider.find_class(name)
            if class_doc is None or class_doc.is_external:
                raise MissingInputError(
                    f"Class {name} not found in the loaded sources",
                    suggestions=["Use the fully qualified class name",
                                 "Check that its source file is under a --source path"],
                )
            targets.append(class_doc)
    else:
        targets = provider.top_level_classes()

    printer = JsonOutputPrinter(output_dir=config.output_dir, indent=config.output_indent)
    extractor = JavadocExtractor(provider, printer=printer, root_type=config.root_type)

    failures = 0
    for class_doc in targets:
        try:
            extractor.extract(class_doc)
        except ExtractionError as e:
            failures += 1
            logger.error(f"Extraction of {class_doc.qualified_name} aborted: {e.message}")

    logger.info(f"Extracted {len(targets) - failures} of {len(targets)} classes")
    return APP.EXIT_FAILURE if failures else APP.EXIT_SUCCESS


def main(argv: Optional[List[str]] = None) -> int:
    """Console entry point."""
    args = parse_arguments(argv)
    try:
        config = graceful_error(build_config)(args)
        return run(config)
    except ExtractionError as e:
        report_error(e)
        return APP.EXIT_FAILURE


if __name__ == "__main__":
    sys.exit(main())
