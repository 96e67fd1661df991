from dataclasses import dataclass
from pathlib import Path
from typing import Any, Generator, Iterator, Optional

from ..artifacts import GeneratedModule
from ..common import logger
from ..pipelineElement import PipelineElement

@dataclass
class WriteFileInput:
    """input: a GeneratedModule or text to write"""
    input: Any = None
    path: Optional[str] = None
    create_dirs: Optional[bool] = None

class WriteFile(PipelineElement):
    """Write text to a file relative to the working directory"""

    def __init__(self, path: str = "./tauri_schemas.py", create_dirs: bool = True):
        super().__init__()

    def process(self, input: Iterator[WriteFileInput]) -> Generator[str, None, None]:
        for request in input:
            request = self.apply_defaults(request)
            item = request.input
            text = item.source if isinstance(item, GeneratedModule) else str(item)

            path = Path(request.path)
            if request.create_dirs:
                path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(text, encoding="utf-8")
            logger().info(f"Wrote {len(text)} characters to {path}")
            yield str(path)
