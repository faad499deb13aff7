"""Constants grouped by concern."""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class JavaConstants:
    """Names fixed by the Java language and the Javadoc tool."""
    ROOT_TYPE: str = "java.lang.Object"
    LANG_PACKAGE: str = "java.lang"
    THROWS_TAG: str = "@throws"
    EXCEPTION_TAG: str = "@exception"
    PARAM_TAG: str = "@param"
    RETURN_TAG: str = "@return"
    VOID: str = "void"

    @property
    def throws_tag_names(self) -> Tuple[str, ...]:
        """Block tag names that document thrown exceptions."""
        return (self.THROWS_TAG, self.EXCEPTION_TAG)

    @property
    def primitive_types(self) -> Tuple[str, ...]:
        return ("boolean", "byte", "char", "short", "int", "long", "float", "double", "void")


@dataclass(frozen=True)
class ApplicationDefaults:
    """Default configuration values."""
    CONFIG_FILE: str = "config/config.yaml"
    OUTPUT_DIR: str = "output"
    OUTPUT_INDENT: int = 2
    LOG_LEVEL: str = "INFO"
    LOG_DIR: str = "logs"
    ENCODING: str = "utf-8"
    MAX_INHERIT_DOC_DEPTH: int = 16


@dataclass(frozen=True)
class ApplicationMetadata:
    """Application metadata and system constants."""
    NAME: str = "jdocminer"
    VERSION: str = "jdocminer 1.0.0"
    OUTPUT_FORMAT_VERSION: str = "1.0"
    EXIT_SUCCESS: int = 0
    EXIT_FAILURE: int = 1


JAVA = JavaConstants()
DEFAULTS = ApplicationDefaults()
APP = ApplicationMetadata()
