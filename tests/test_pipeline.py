from dataclasses import dataclass
from typing import Any, Optional

import pytest

from tauri_config.artifacts import FetchedSchema, GeneratedModule
from tauri_config.common import MalformedPipelineElement
from tauri_config.elements import CompileValidators, FetchSchema, WriteFile
from tauri_config.elements.compile import CompileTypesInput
from tauri_config.elements.fetch import FetchSchemaInput
from tauri_config.pipeline import Pipeline


@dataclass
class Request:
    input: Any = None
    path: Optional[str] = None


class Carrier:
    def __init__(self, path):
        self.path = path


@pytest.fixture
def empty_pipeline():
    return Pipeline([])


def test_convert_dict_keeps_matching_fields(empty_pipeline):
    converted = empty_pipeline._convert_item_to_type({"path": "a.py", "other": 1}, Request)
    assert converted == Request(path="a.py")


def test_convert_object_uses_its_attributes(empty_pipeline):
    assert empty_pipeline._convert_item_to_type(Carrier("b.py"), Request) == Request(path="b.py")


def test_convert_wraps_unmatched_items_as_input(empty_pipeline):
    assert empty_pipeline._convert_item_to_type("schema.json", FetchSchemaInput) == FetchSchemaInput(input="schema.json")
    module = GeneratedModule(name="m", source="x = 1\n")
    assert empty_pipeline._convert_item_to_type(module, Request) == Request(input=module)


def test_convert_between_artifacts(empty_pipeline):
    fetched = FetchedSchema(source="schema.json", document={"type": "object"})
    converted = empty_pipeline._convert_item_to_type(fetched, CompileTypesInput)
    assert converted == CompileTypesInput(document={"type": "object"}, source="schema.json")


def test_convert_passes_through_matching_types(empty_pipeline):
    request = Request(path="c.py")
    assert empty_pipeline._convert_item_to_type(request, Request) is request
    assert empty_pipeline._convert_item_to_type(3, Any) == 3


def test_elements_need_an_id():
    with pytest.raises(MalformedPipelineElement):
        Pipeline([{"path": "x.py"}])
    with pytest.raises(ValueError, match="Missing required argument"):
        Pipeline([{"id": "tauri_config.type_compiler.SchemaCompiler"}])


def test_sequence_protocol():
    pipeline = Pipeline([
        {"id": "tauri_config.elements.FetchSchema", "timeout": 5},
        {"id": "tauri_config.elements.WriteFile", "path": "out.py"},
    ])
    assert len(pipeline) == 2
    assert isinstance(pipeline[0], FetchSchema)
    assert isinstance(pipeline[-1], WriteFile)
    assert pipeline[0]._defaults["timeout"] == 5


def test_run_generates_validators(tmp_path, mini_schema_path):
    output = tmp_path / "out" / "validators.py"
    pipeline = Pipeline([
        {"id": "tauri_config.elements.FetchSchema"},
        {"id": "tauri_config.elements.CompileTypes", "root_name": "config"},
        {"id": "tauri_config.elements.CompileValidators", "keep_comments": False},
        {"id": "tauri_config.elements.WriteFile", "path": str(output)},
    ])
    assert isinstance(pipeline[2], CompileValidators)

    written = pipeline.run({"input": str(mini_schema_path)})

    assert written == str(output)
    text = output.read_text(encoding="utf-8")
    assert "class Config(_ClosedModel):" in text
    assert "System theme." not in text
    assert pipeline.stats.total_items_processed == 1
    assert [m.status for m in pipeline.stats.element_metrics] == ["completed"] * 4
    assert all(m.items_processed == 1 for m in pipeline.stats.element_metrics)


def test_errors_stop_the_pipeline(tmp_path):
    pipeline = Pipeline([
        {"id": "tauri_config.elements.FetchSchema"},
        {"id": "tauri_config.elements.WriteFile", "path": str(tmp_path / "never.py")},
    ])
    with pytest.raises(OSError):
        pipeline.run({"input": str(tmp_path / "missing.json")})
    assert not (tmp_path / "never.py").exists()


def test_errors_can_be_tolerated(tmp_path):
    pipeline = Pipeline([
        {"id": "tauri_config.elements.FetchSchema"},
        {"id": "tauri_config.elements.WriteFile", "path": str(tmp_path / "never.py")},
    ], stop_on_error=False)
    assert pipeline.run({"input": str(tmp_path / "missing.json")}) is None
    statuses = {m.element_id.split(".")[-1]: m.status for m in pipeline.stats.element_metrics}
    assert statuses == {"FetchSchema": "failed", "WriteFile": "completed"}


def test_from_config_expands_variables(tmp_path):
    definition = tmp_path / "pipeline.yaml"
    definition.write_text(
        "- id: tauri_config.elements.WriteFile\n"
        "  path: ${OUT_DIR}/${NAME:-hello.txt}\n",
        encoding="utf-8",
    )
    pipeline = Pipeline.from_config(str(definition), expand_env=True, variables={"OUT_DIR": str(tmp_path)})
    assert pipeline.run({"input": "hello"}) == str(tmp_path / "hello.txt")
    assert (tmp_path / "hello.txt").read_text(encoding="utf-8") == "hello"


def test_from_config_json(tmp_path):
    definition = tmp_path / "pipeline.json"
    definition.write_text(
        '[\n  // fetch only\n  {"id": "tauri_config.elements.FetchSchema", "timeout": 3}\n]',
        encoding="utf-8",
    )
    pipeline = Pipeline.from_config(str(definition))
    assert pipeline[0]._defaults == {"timeout": 3}


def test_from_config_rejects_unknown_files(tmp_path):
    with pytest.raises(ValueError, match="Unsupported pipeline file type"):
        Pipeline.from_config(str(tmp_path / "pipeline.txt"))

    definition = tmp_path / "pipeline.yaml"
    definition.write_text("id: tauri_config.elements.FetchSchema\n", encoding="utf-8")
    with pytest.raises(MalformedPipelineElement):
        Pipeline.from_config(str(definition))


def test_packaged_pipeline_loads():
    from tauri_config.cli import DEFAULT_PIPELINE
    pipeline = Pipeline.from_config(DEFAULT_PIPELINE, expand_env=True, variables={})
    assert [type(e).__name__ for e in pipeline.elements] == [
        "SelectSchema", "FetchSchema", "CompileTypes", "CompileValidators", "FormatSource", "WriteFile",
    ]
    assert pipeline[-1]._defaults["path"] == "./tauri_schemas.py"
    assert pipeline[2]._defaults["types_output"] is None


def test_configure_overrides_constructor_defaults(tmp_path):
    element = WriteFile(path="default.py").configure(path=str(tmp_path / "configured.py"))
    pipeline = Pipeline([])
    pipeline.elements.append(element)
    assert pipeline.run({"input": "text"}) == str(tmp_path / "configured.py")
