"""Utility functions for CLI operations."""

import argparse
import logging
import sys
from enum import IntEnum
from typing import NoReturn, Optional, Union

from pydantic import BaseModel, ValidationError

from ..config import Config
from ..errors import NotFoundError, ParseError, SaveError, TaggyError
from ..tag import TagType
from .schemas import ErrorResponse


class ExitCode(IntEnum):
    """Process exit codes shared by every command."""

    SUCCESS = 0
    INVALID_TAG = 2
    NOT_FOUND = 10
    PARSE_ERROR = 20
    SAVE_ERROR = 30


ERRORS = {
    NotFoundError: ("not_found", ExitCode.NOT_FOUND),
    ParseError: ("parse_error", ExitCode.PARSE_ERROR),
    SaveError: ("save_failed", ExitCode.SAVE_ERROR),
    ValidationError: ("invalid_tag", ExitCode.INVALID_TAG),
}


def setup_logging(level: str) -> None:
    """Configure logging based on user-specified level.

    Args:
        level: Logging level (debug, info, warning, error, critical)
    """
    numeric_level = getattr(logging, level.upper(), None)
    if not isinstance(numeric_level, int):
        raise ValueError(f"Invalid log level: {level}")

    logging.basicConfig(
        level=numeric_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def json_output(response: BaseModel, exit_code: ExitCode = ExitCode.SUCCESS) -> None:
    """Print a response model as JSON, exiting when exit_code is not SUCCESS."""
    print(response.model_dump_json(indent=2, exclude_none=True))
    if exit_code != ExitCode.SUCCESS:
        sys.exit(exit_code)


def exit_with_error(error: Union[TaggyError, ValidationError], use_json: bool) -> NoReturn:
    """Report a failed operation and exit with the matching code."""
    code, exit_code = ERRORS.get(type(error), ("error", ExitCode.SAVE_ERROR))
    if use_json:
        json_output(ErrorResponse(error=code, message=str(error)), exit_code)
    logging.error("%s", error)
    print(f"Error: {error}", file=sys.stderr)
    sys.exit(exit_code)


def load_config(args: argparse.Namespace) -> Config:
    """Load the configuration named by -c/--config, or the default one."""
    return Config(getattr(args, "config", None))


def use_json_output(args: argparse.Namespace, config: Config) -> bool:
    """JSON is printed when asked for on the command line or in the config."""
    use_json = bool(getattr(args, "json", False)) or config.get_json_output()

    # In JSON mode, suppress INFO/DEBUG logs to keep output clean for parsing
    if use_json and logging.getLogger().level < logging.WARNING:
        logging.getLogger().setLevel(logging.WARNING)
    return use_json


def parse_tag_type(value: str) -> TagType:
    """argparse type for tag types: accepts names (id3v2) and values (Id3v2)."""
    normalized = value.strip().replace("-", "_").upper()
    if normalized == "PRIMARY":
        return TagType.FILE_PRIMARY_TYPE
    for tag_type in TagType:
        if normalized in (tag_type.name, tag_type.value.upper()):
            return tag_type
    choices = ", ".join(t.name.lower() for t in TagType if t != TagType.FILE_PRIMARY_TYPE)
    raise argparse.ArgumentTypeError(f"invalid tag type '{value}' (choose from {choices}, primary)")


def format_value(value) -> Optional[str]:
    if value is None:
        return None
    return str(value)
