"""Configuration management module."""

from .constants import JAVA, DEFAULTS, APP
from .argument_parser import parse_arguments

__all__ = ['JAVA', 'DEFAULTS', 'APP', 'parse_arguments']
