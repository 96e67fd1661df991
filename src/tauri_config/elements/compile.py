from dataclasses import dataclass
from pathlib import Path
from typing import Any, Generator, Iterator, Optional

from ..artifacts import GeneratedModule
from ..common import logger
from ..declarations import DeclarationSet
from ..formatter import format_python
from ..pipelineElement import PipelineElement
from ..type_compiler import compile_schema, render_typed_dicts
from ..validator_compiler import compile_validators

@dataclass
class CompileTypesInput:
    document: Any = None
    source: Optional[str] = None
    root_name: Optional[str] = None
    types_output: Optional[str] = None

class CompileTypes(PipelineElement):
    """Compile a fetched JSON Schema into structural declarations

    When `types_output` is set the declarations are also written there as a
    formatted TypedDict module.
    """

    def __init__(self, root_name: str = "config", types_output: Optional[str] = None):
        super().__init__()

    def process(self, input: Iterator[CompileTypesInput]) -> Generator[DeclarationSet, None, None]:
        for schema in input:
            schema = self.apply_defaults(schema)
            declarations = compile_schema(schema.document, root_name=schema.root_name, origin=schema.source)
            logger().info(f"Compiled {len(declarations)} type declarations")

            if schema.types_output:
                path = Path(schema.types_output)
                path.parent.mkdir(parents=True, exist_ok=True)
                path.write_text(format_python(render_typed_dicts(declarations)), encoding="utf-8")
                logger().info(f"Wrote type declarations to {path}")

            yield declarations

@dataclass
class CompileValidatorsInput:
    """input: the DeclarationSet to render"""
    input: Any = None
    module_name: Optional[str] = None
    keep_comments: Optional[bool] = None

class CompileValidators(PipelineElement):
    """Render declarations as a module of pydantic validators"""

    def __init__(self, module_name: str = "tauri-config", keep_comments: bool = True):
        super().__init__()

    def process(self, input: Iterator[CompileValidatorsInput]) -> Generator[GeneratedModule, None, None]:
        for request in input:
            request = self.apply_defaults(request)
            declarations: DeclarationSet = request.input
            source = compile_validators(declarations, module_name=request.module_name, keep_comments=request.keep_comments)
            yield GeneratedModule(name=request.module_name, source=source, origin=declarations.origin)
