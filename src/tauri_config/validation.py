"""
Validation of `tauri.conf.json` files against the checked-in validators.
"""

from typing import Any, List

from pydantic import ValidationError

from .common import loadjson, logger
from .tauri_schemas import Config


def load_config_file(path: str) -> Any:
    """Parse a configuration file; `//` and `#` comments are tolerated"""
    logger().debug(f"Loading {path}")
    return loadjson(path)


def validate_config(data: Any) -> Config:
    """Validate a parsed configuration document.

    Raises:
        pydantic.ValidationError: the document does not match the data model
    """
    return Config.model_validate(data)


def format_errors(error: ValidationError) -> List[str]:
    """One `path: message` line per validation error"""
    lines = []
    for detail in error.errors():
        location = ".".join(str(part) for part in detail["loc"]) or "<root>"
        lines.append(f"{location}: {detail['msg']}")
    return lines
