from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class FetchedSchema:
    """A JSON Schema document and where it came from"""
    source: str
    document: Any


@dataclass
class GeneratedModule:
    """Python source produced by one of the compilers"""
    name: str
    source: str
    origin: Optional[str] = None
