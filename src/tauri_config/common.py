import inspect
import json
import logging
import os
import re
import sys
from importlib import import_module
from typing import Any, Mapping, Optional
from urllib.parse import urlparse
from urllib.request import Request, urlopen

import commentjson
import yaml
from python_log_indenter import IndentedLoggerAdapter

LOGGER_NAME = "tauri-config"
USER_AGENT = "tauri-config-extractor"


class TauriConfigError(Exception):
    """Base class for errors raised by tauri-config"""


class MalformedPipelineElement(TauriConfigError):
    pass


class SelectionCancelled(TauriConfigError):
    pass


class UnsupportedSchemaError(TauriConfigError):
    def __init__(self, message: str, pointer: str = "#"):
        super().__init__(f"{message} (at {pointer})")
        self.pointer = pointer


class FormatterError(TauriConfigError):
    pass


class ColorFormatter(logging.Formatter):
    """Colored console formatter with customizable format string"""

    lightgray = "\x1b[1;30m"
    gray = "\x1b[38;20m"
    yellow = "\x1b[33;20m"
    red = "\x1b[31;20m"
    bold_red = "\x1b[31;1m"
    reset = "\x1b[0m"

    def __init__(self, format_string=None, use_colors=True):
        super().__init__()
        self.use_colors = use_colors
        self.format_string = format_string or "%(asctime)s - %(levelname)s - %(message)s"

        colors = {
            logging.DEBUG: self.lightgray,
            logging.INFO: self.gray,
            logging.WARNING: self.yellow,
            logging.ERROR: self.red,
            logging.CRITICAL: self.bold_red,
        }
        if self.use_colors:
            self.FORMATS = {level: color + self.format_string + self.reset for level, color in colors.items()}
        else:
            self.FORMATS = {level: self.format_string for level in colors}

    def format(self, record):
        formatter = logging.Formatter(self.FORMATS.get(record.levelno, self.format_string))
        return formatter.format(record)


class SimpleFormatter(logging.Formatter):
    """Plain `LEVEL: message` lines"""

    def __init__(self, format_string=None):
        super().__init__(format_string or "%(levelname)s: %(message)s")


class StructuredFormatter(logging.Formatter):
    """One JSON object per record, for machine consumption"""

    def format(self, record):
        log_record = {
            'timestamp': self.formatTime(record),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            'module': record.module,
            'function': record.funcName,
            'line': record.lineno
        }

        if record.exc_info:
            log_record['exception'] = self.formatException(record.exc_info)

        return json.dumps(log_record)


_logger = None
_logger_config = None

def logger(
    level: str = None,
    format_type: str = None,
    output: str = None,
    filename: str = None,
    use_colors: bool = None,
    reset: bool = False
) -> IndentedLoggerAdapter:
    """
    Get or create the tauri-config logger.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL) - None keeps the configured one
        format_type: Formatter type ('color', 'simple', 'structured') - None keeps the configured one
        output: Output destination ('console', 'file', 'both')
        filename: Log file path (required if output includes 'file')
        use_colors: Force color usage on/off (auto-detect if None)
        reset: Force recreation of the logger

    Returns:
        An IndentedLoggerAdapter so callers can push()/pop() nesting levels
    """
    global _logger, _logger_config

    previous = _logger_config or {}
    current_config = {
        'level': (level or previous.get('level') or 'INFO').upper(),
        'format_type': format_type or previous.get('format_type') or 'color',
        'output': output or previous.get('output') or 'console',
        'filename': filename if filename is not None else previous.get('filename'),
        'use_colors': use_colors if use_colors is not None else previous.get('use_colors'),
    }

    if not reset and _logger is not None and _logger_config == current_config:
        return _logger

    colors = current_config['use_colors']
    if colors is None:
        colors = hasattr(sys.stderr, "isatty") and sys.stderr.isatty()

    log = logging.getLogger(LOGGER_NAME)
    for handler in log.handlers:
        handler.close()
    log.handlers.clear()
    log.propagate = False

    numeric_level = getattr(logging, current_config['level'], logging.INFO)
    log.setLevel(numeric_level)

    format_type = current_config['format_type']
    if format_type == "simple":
        formatter = SimpleFormatter()
    elif format_type == "structured":
        formatter = StructuredFormatter()
    else:
        formatter = ColorFormatter(use_colors=colors)

    output = current_config['output']
    if output in ("console", "both"):
        console_handler = logging.StreamHandler()
        console_handler.setLevel(numeric_level)
        console_handler.setFormatter(formatter)
        log.addHandler(console_handler)

    if output in ("file", "both"):
        if not current_config['filename']:
            raise ValueError("filename must be provided when output includes 'file'")
        file_handler = logging.FileHandler(current_config['filename'])
        file_handler.setLevel(numeric_level)
        # Files always get JSON lines unless a plain format was asked for
        file_handler.setFormatter(formatter if format_type == "simple" else StructuredFormatter())
        log.addHandler(file_handler)

    _logger = IndentedLoggerAdapter(log)
    _logger_config = current_config
    return _logger

def set_log_level(level: str):
    """Change the level of the tauri-config logger and its handlers"""
    numeric_level = getattr(logging, level.upper(), None)
    if not isinstance(numeric_level, int):
        raise ValueError(f'Invalid log level: {level}')

    if _logger is None:
        logger(level=level)
        return

    _logger_config['level'] = level.upper()
    underlying = _logger.logger
    underlying.setLevel(numeric_level)
    for handler in underlying.handlers:
        handler.setLevel(numeric_level)

def instantiate(class_str: str, **kwargs):
    """Create an instance of a fully qualified class, matching constructor arguments by name.

    Keys that are not constructor parameters are set as attributes afterwards.
    """
    if class_str is None:
        return None
    module_path, class_name = class_str.rsplit('.', 1)
    klass = getattr(import_module(module_path), class_name)

    signature = inspect.signature(klass.__init__)
    constructor_args = {}
    for name, param in signature.parameters.items():
        if name in ("self", "args", "kwargs"):
            continue
        if name in kwargs:
            constructor_args[name] = kwargs.pop(name)
        elif param.default is param.empty:
            raise ValueError(f"Missing required argument: {name}")

    instance = klass(**constructor_args)
    for k, v in kwargs.items():
        setattr(instance, k, v)
    return instance

def expand_env_vars(text: str, variables: Optional[Mapping[str, str]] = None) -> str:
    """Expand ${VAR}, ${VAR:-default} and $VAR from `variables` (os.environ by default)."""
    if variables is None:
        variables = os.environ

    def replacer(match):
        var_expr = match.group(1)
        if ':-' in var_expr:
            var_name, default_value = var_expr.split(':-', 1)
            default_value = default_value.strip('\'"')
            return variables.get(var_name) or default_value
        return variables.get(var_expr, match.group(0))

    text = re.sub(r'\$\{([^}]+)\}', replacer, text)
    return re.sub(r'\$([A-Za-z_][A-Za-z0-9_]*)', lambda m: variables.get(m.group(1), m.group(0)), text)

def loads(data: str, expand_env: bool = False, variables: Optional[Mapping[str, str]] = None) -> Any:
    if expand_env:
        data = expand_env_vars(data, variables)
    return commentjson.loads(data)

def loadjson(filename, expand_env: bool = False, variables: Optional[Mapping[str, str]] = None) -> Any:
    with open(filename, encoding="utf-8") as f:
        return loads(f.read(), expand_env, variables)

def loadyaml(filename, expand_env: bool = False, variables: Optional[Mapping[str, str]] = None) -> Any:
    with open(filename, encoding="utf-8") as f:
        data = f.read()
    if expand_env:
        data = expand_env_vars(data, variables)
    return yaml.safe_load(data)

def is_url(resource: str) -> bool:
    result = urlparse(resource)
    return all([result.scheme, result.netloc])

def fetch_json(resource: str, timeout: int = 30) -> Any:
    """Load a JSON document from an http(s) URL or a local path.

    Errors propagate: URLError/HTTPError for the network, OSError for files and
    ValueError for undecodable content.
    """
    if is_url(resource):
        request = Request(resource, headers={"Accept": "application/json", "User-Agent": USER_AGENT})
        with urlopen(request, timeout=timeout) as response:
            charset = response.headers.get_content_charset() or "utf-8"
            return json.loads(response.read().decode(charset))
    return loadjson(resource)
