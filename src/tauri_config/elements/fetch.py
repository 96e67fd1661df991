from dataclasses import dataclass
from typing import Any, Generator, Iterator, Optional

from ..artifacts import FetchedSchema
from ..common import fetch_json, logger
from ..pipelineElement import PipelineElement

@dataclass
class FetchSchemaInput:
    """input: schema URL or local path"""
    input: Any = None
    timeout: Optional[int] = None

class FetchSchema(PipelineElement):
    """Download (or read) a JSON Schema document"""

    def __init__(self, timeout: int = 30):
        super().__init__()

    def process(self, input: Iterator[FetchSchemaInput]) -> Generator[FetchedSchema, None, None]:
        for request in input:
            request = self.apply_defaults(request)
            logger().info(f"Fetching {request.input}")
            document = fetch_json(request.input, timeout=request.timeout)
            yield FetchedSchema(source=request.input, document=document)
