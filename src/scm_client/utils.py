import logging
import tomllib
import typing

import pydantic

LOGGER = logging.getLogger(__name__)


def load_toml(toml_file: typing.TextIO) -> dict:
    """Load TOML data from a file-like object

    Args:
        toml_file: The file-like object to load as TOML

    Raises:
        tomllib.TOMLDecodeError: If TOML parsing fails

    """
    return tomllib.loads(toml_file.read())


def dump_json(value: typing.Any) -> str:
    """Render a domain value, or a list of them, as indented JSON."""
    return (
        pydantic.TypeAdapter(typing.Any).dump_json(value, indent=2).decode()
    )
