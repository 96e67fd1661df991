import keyword
import re
from typing import Iterable

_WORD_SPLIT = re.compile(r"[^0-9a-zA-Z]+")
_ACRONYM_BOUNDARY = re.compile(r"([A-Z]+)([A-Z][a-z])")
_CAMEL_BOUNDARY = re.compile(r"([a-z0-9])([A-Z])")


def pascal_case(name: str) -> str:
    # "fixedRuntime" -> "FixedRuntime", "nsis-config" -> "NsisConfig"
    parts = [p for p in _WORD_SPLIT.split(name) if p]
    result = "".join(p[0].upper() + p[1:] for p in parts)
    if not result:
        return "Anonymous"
    if result[0].isdigit():
        result = "_" + result
    return result


def snake_case(name: str) -> str:
    # "macOSPrivateApi" -> "mac_os_private_api", "$schema" -> "schema"
    name = _ACRONYM_BOUNDARY.sub(r"\1_\2", name)
    name = _CAMEL_BOUNDARY.sub(r"\1_\2", name)
    parts = [p for p in _WORD_SPLIT.split(name) if p]
    return "_".join(parts).lower()


def python_identifier(name: str, reserved: Iterable[str] = ()) -> str:
    """Snake-case a wire name into a usable attribute name.

    Keywords and names in `reserved` get a trailing underscore; names starting
    with a digit get a `field_` prefix.
    """
    identifier = snake_case(name) or "field"
    if identifier[0].isdigit():
        identifier = "field_" + identifier
    if keyword.iskeyword(identifier) or identifier in set(reserved):
        identifier += "_"
    return identifier
