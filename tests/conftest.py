import importlib.util
import itertools
import json
import sys
from pathlib import Path

import pytest

from tauri_config import tauri_schemas
from tauri_config.common import logger
from tauri_config.type_compiler import compile_schema
from tauri_config.validator_compiler import compile_validators

DATA_DIR = Path(__file__).parent / "data"
MINI_SCHEMA = DATA_DIR / "tauri-mini.schema.json"

_module_ids = itertools.count()


def load_module(path: Path, name: str):
    spec = importlib.util.spec_from_file_location(name, path)
    module = importlib.util.module_from_spec(spec)
    sys.modules[name] = module
    spec.loader.exec_module(module)
    return module


def generate_module(schema, directory: Path, root_name: str = "config"):
    """Compile a schema to validators, write them under `directory` and import them"""
    declarations = compile_schema(schema, root_name=root_name, origin="tests")
    name = f"generated_schemas_{next(_module_ids)}"
    path = directory / f"{name}.py"
    path.write_text(compile_validators(declarations), encoding="utf-8")
    return load_module(path, name)


@pytest.fixture(autouse=True)
def quiet_logger():
    logger(level="WARNING", format_type="simple", use_colors=False, reset=True)


@pytest.fixture
def mini_schema_path() -> Path:
    return MINI_SCHEMA


@pytest.fixture
def mini_schema():
    return json.loads(MINI_SCHEMA.read_text(encoding="utf-8"))


@pytest.fixture
def build_module(tmp_path):
    def build(schema, root_name: str = "config"):
        return generate_module(schema, tmp_path, root_name)
    return build


@pytest.fixture(scope="session")
def generated_schemas(tmp_path_factory):
    schema = json.loads(MINI_SCHEMA.read_text(encoding="utf-8"))
    return generate_module(schema, tmp_path_factory.mktemp("generated"))


@pytest.fixture(params=["checked-in", "generated"])
def schemas(request):
    """The bundled validators and validators freshly generated from the fixture schema"""
    if request.param == "checked-in":
        return tauri_schemas
    return request.getfixturevalue("generated_schemas")
