from dataclasses import dataclass, replace
from typing import Any, Generator, Iterator, Optional

from ..artifacts import GeneratedModule
from ..formatter import format_python
from ..pipelineElement import PipelineElement

@dataclass
class FormatSourceInput:
    """input: a GeneratedModule or a plain source string"""
    input: Any = None
    line_length: Optional[int] = None

class FormatSource(PipelineElement):
    """Run generated source through `ruff format`"""

    def __init__(self, line_length: int = 88):
        super().__init__()

    def process(self, input: Iterator[FormatSourceInput]) -> Generator[Any, None, None]:
        for request in input:
            request = self.apply_defaults(request)
            item = request.input
            if isinstance(item, GeneratedModule):
                yield replace(item, source=format_python(item.source, request.line_length))
            else:
                yield format_python(item, request.line_length)
