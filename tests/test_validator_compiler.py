import pytest
from pydantic import ValidationError

from tauri_config.formatter import format_python
from tauri_config.type_compiler import compile_schema
from tauri_config.validator_compiler import attribute_names, compile_validators


@pytest.fixture
def source(mini_schema):
    return compile_validators(compile_schema(mini_schema, origin="tauri-mini.schema.json"))


def test_module_header_names_module_and_origin(source):
    assert source.startswith('"""\nRuntime validators for tauri-config.\n')
    assert "Generated from tauri-mini.schema.json." in source
    compile(source, "validators.py", "exec")


def test_models_and_aliases(source):
    assert "class Config(_ClosedModel):" in source
    assert "class PatternKindBrownfield(_OpenModel):" in source
    assert 'schema_: Optional[StrictStr] = Field(default=None, alias="$schema")' in source
    assert 'mac_os_private_api: StrictBool = Field(default=None, alias="macOSPrivateApi")' in source
    assert "identifier: StrictStr\n" in source
    assert 'Annotated[Union[PatternKindBrownfield, PatternKindIsolation], Field(discriminator="use")]' in source
    assert "Annotated[StrictInt, Field(ge=0, le=255)]" in source
    assert "BundleTarget = Union[Literal[\"all\"], List[BundleType], BundleType]" in source


def test_descriptions_become_docstrings_and_comments(source):
    assert '    """The application identifier in reverse domain name notation."""' in source
    assert "# System theme." in source


def test_comments_can_be_dropped(mini_schema):
    source = compile_validators(compile_schema(mini_schema), keep_comments=False)
    assert "System theme." not in source
    assert "reverse domain name notation" not in source


def test_generated_source_is_formatted_cleanly(source):
    formatted = format_python(source)
    compile(formatted, "validators.py", "exec")
    assert format_python(formatted) == formatted


def test_attribute_names_are_unique_and_safe():
    declarations = compile_schema({
        "type": "object",
        "properties": {
            "fooBar": {"type": "string"},
            "foo_bar": {"type": "string"},
            "class": {"type": "string"},
            "json": {"type": "string"},
        },
    })
    names = attribute_names(declarations["Config"].type)
    assert names == {"fooBar": "foo_bar", "foo_bar": "foo_bar_2", "class": "class_", "json": "json_"}


def test_generated_module_validates_aliases_and_names(build_module):
    module = build_module({
        "type": "object",
        "properties": {
            "productName": {"type": "string"},
            "count": {"type": "integer", "minimum": 1},
        },
        "required": ["productName"],
        "additionalProperties": False,
    })
    config = module.Config.model_validate({"productName": "app", "count": 2})
    assert config.product_name == "app"
    assert module.Config(product_name="app").count is None
    assert config.model_dump(by_alias=True, exclude_none=True) == {"productName": "app", "count": 2}

    with pytest.raises(ValidationError):
        module.Config.model_validate({"productName": "app", "count": 0})
    with pytest.raises(ValidationError):
        module.Config.model_validate({"productName": "app", "unknown": True})
    with pytest.raises(ValidationError):
        module.Config.model_validate({"productName": 1})


def test_generated_module_handles_recursion(build_module):
    module = build_module({
        "type": "object",
        "properties": {"root": {"$ref": "#/definitions/Node"}},
        "definitions": {
            "Node": {
                "type": "object",
                "required": ["name"],
                "properties": {
                    "name": {"type": "string"},
                    "children": {"type": "array", "items": {"$ref": "#/definitions/Node"}},
                },
            },
        },
    })
    config = module.Config.model_validate({
        "root": {"name": "a", "children": [{"name": "b", "children": [{"name": "c"}]}]},
    })
    assert config.root.children[0].children[0].name == "c"
    with pytest.raises(ValidationError):
        module.Config.model_validate({"root": {"children": [{"name": "b"}]}})


def test_generated_models_are_frozen(build_module):
    module = build_module({"type": "object", "properties": {"a": {"type": "string"}}})
    config = module.Config.model_validate({"a": "x"})
    with pytest.raises(ValidationError):
        config.a = "y"


def test_array_bounds(build_module):
    module = build_module({
        "type": "object",
        "properties": {"tags": {"type": "array", "items": {"type": "string"}, "minItems": 1, "maxItems": 2}},
    })
    module.Config.model_validate({"tags": ["a"]})
    for tags in ([], ["a", "b", "c"]):
        with pytest.raises(ValidationError):
            module.Config.model_validate({"tags": tags})


def test_null_needs_a_nullable_type(build_module):
    module = build_module({
        "type": "object",
        "properties": {
            "plain": {"type": "boolean"},
            "nullable": {"type": ["string", "null"]},
            "ref": {"anyOf": [{"$ref": "#/definitions/Name"}, {"type": "null"}]},
        },
        "definitions": {"Name": {"type": "string"}},
    })
    config = module.Config.model_validate({})
    assert config.plain is None
    assert module.Config.model_validate({"nullable": None, "ref": None}).ref is None
    with pytest.raises(ValidationError):
        module.Config.model_validate({"plain": None})


def test_optional_only_for_nullable_fields(mini_schema):
    source = compile_validators(compile_schema(mini_schema))
    assert "    identifier: StrictStr\n" in source
    assert "    targets: BundleTarget = None\n" in source
    assert "    theme: Optional[Theme] = None\n" in source
    assert "Optional[StrictBool]" not in source


def test_root_all_of_with_definitions_validates(build_module):
    module = build_module({
        "definitions": {
            "Base": {"type": "object", "required": ["name"], "properties": {"name": {"type": "string"}}},
        },
        "allOf": [{"$ref": "#/definitions/Base"}, {"properties": {"mode": {"type": "string"}}}],
    })
    assert module.Config.model_validate({"name": "a", "mode": "b"}).mode == "b"
    with pytest.raises(ValidationError):
        module.Config.model_validate({"mode": "b"})
