"""
Source formatting through the `ruff` binary.
"""

import subprocess

from ruff.__main__ import find_ruff_bin

from .common import FormatterError, logger


def format_python(source: str, line_length: int = 88) -> str:
    """Format Python source with `ruff format`, reading stdin and writing stdout.

    Raises:
        FormatterError: ruff rejected the source (usually a syntax error)
    """
    command = [
        find_ruff_bin(),
        "format",
        "--line-length", str(line_length),
        "--stdin-filename", "generated.py",
        "-",
    ]
    logger().debug(f"Running {' '.join(command)}")
    result = subprocess.run(command, input=source, capture_output=True, text=True, encoding="utf-8")
    if result.returncode != 0:
        raise FormatterError(f"ruff format failed: {result.stderr.strip()}")
    return result.stdout
