import pytest

from tauri_config.common import UnsupportedSchemaError
from tauri_config.declarations import (
    ArrayType, LiteralType, MapType, ObjectType, Primitive, Reference, TupleType, UnionType,
)
from tauri_config.type_compiler import compile_schema, make_union, render_typed_dicts


@pytest.fixture
def declarations(mini_schema):
    return compile_schema(mini_schema, origin="tauri-mini.schema.json")


def test_root_and_definitions_are_declared(declarations):
    assert declarations.root == "Config"
    assert declarations.origin == "tauri-mini.schema.json"
    for name in ("Config", "TauriConfig", "WindowConfig", "BundleConfig", "SecurityConfig", "Color"):
        assert name in declarations


def test_single_member_all_of_is_unwrapped(declarations):
    tauri = declarations["Config"].type.get_field("tauri")
    assert tauri.type == Reference("TauriConfig")
    assert not tauri.required
    assert tauri.description == "The Tauri configuration."


def test_nullable_type_list(declarations):
    schema_field = declarations["Config"].type.get_field("$schema")
    assert isinstance(schema_field.type, UnionType)
    assert schema_field.type.nullable
    assert schema_field.type.without_null() == [Primitive("string")]


def test_closed_and_open_objects(declarations):
    assert declarations["Config"].type.closed
    assert declarations["WindowsConfig"].type.closed
    assert not declarations["PatternKindBrownfield"].type.closed
    assert not declarations["BeforeDevCommandObject"].type.closed


def test_discriminated_union_variants_are_hoisted(declarations):
    pattern = declarations["PatternKind"].type
    assert isinstance(pattern, UnionType)
    assert pattern.discriminator == "use"
    assert pattern.options == [Reference("PatternKindBrownfield"), Reference("PatternKindIsolation")]

    isolation = declarations["PatternKindIsolation"].type
    assert isolation.get_field("use").type == LiteralType(["isolation"])
    assert isolation.get_field("options").type == Reference("PatternKindIsolationOptions")
    assert isolation.get_field("options").required
    assert declarations["PatternKindIsolationOptions"].type.get_field("dir").required

    install = declarations["WebviewInstallMode"].type
    assert install.discriminator == "type"
    assert Reference("WebviewInstallModeFixedRuntime") in install.options


def test_literal_variants_collapse(declarations):
    assert declarations["Theme"].type == LiteralType(["Light", "Dark"])
    assert declarations["BundleType"].type.values == ["deb", "appimage", "msi", "nsis", "app", "dmg", "updater"]


def test_union_of_shapes_keeps_every_member(declarations):
    target = declarations["BundleTarget"].type
    assert target == UnionType([
        LiteralType(["all"]),
        ArrayType(Reference("BundleType")),
        Reference("BundleType"),
    ])
    csp = declarations["Csp"].type
    assert csp == UnionType([Primitive("string"), MapType(Reference("CspDirectiveSources"))])


def test_single_object_member_gets_object_suffix(declarations):
    command = declarations["BeforeDevCommand"].type
    assert command == UnionType([Primitive("string"), Reference("BeforeDevCommandObject")])


def test_tuple_items_carry_format_bounds(declarations):
    color = declarations["Color"].type
    assert isinstance(color, TupleType)
    assert len(color.items) == 4
    assert color.items[0] == Primitive("integer", {"minimum": 0, "maximum": 255})


def test_open_maps(declarations):
    assert declarations["PluginConfig"].type == MapType(Primitive("any"))


def test_ordered_puts_dependencies_first(declarations):
    order = [d.name for d in declarations.ordered()]
    assert order[-1] == "Config"
    assert len(order) == len(declarations)
    for declaration in declarations.ordered():
        for dependency in declarations.dependencies(declaration.name):
            assert order.index(dependency) < order.index(declaration.name)


def test_ordered_tolerates_cycles():
    declarations = compile_schema({
        "type": "object",
        "properties": {"root": {"$ref": "#/definitions/Node"}},
        "definitions": {
            "Node": {
                "type": "object",
                "properties": {"children": {"type": "array", "items": {"$ref": "#/definitions/Node"}}},
            },
        },
    })
    assert [d.name for d in declarations.ordered()] == ["Node", "Config"]


def test_all_of_merges_object_members():
    declarations = compile_schema({
        "type": "object",
        "properties": {
            "window": {
                "allOf": [
                    {"$ref": "#/definitions/Size"},
                    {"type": "object", "properties": {"title": {"type": "string"}}, "required": ["title"]},
                ],
            },
        },
        "definitions": {
            "Size": {
                "type": "object",
                "properties": {"width": {"type": "number"}},
                "required": ["width"],
                "additionalProperties": False,
            },
        },
    })
    window = declarations["ConfigWindow"].type
    assert [f.name for f in window.fields] == ["width", "title"]
    assert all(f.required for f in window.fields)
    assert window.closed


def test_definitions_and_2019_defs_are_both_resolved():
    declarations = compile_schema({
        "type": "object",
        "properties": {"a": {"$ref": "#/$defs/A"}, "b": {"$ref": "#/definitions/B"}},
        "$defs": {"A": {"type": "string", "minLength": 1}},
        "definitions": {"B": {"type": "integer", "format": "uint16"}},
    })
    assert declarations["A"].type == Primitive("string", {"minLength": 1})
    assert declarations["B"].type == Primitive("integer", {"minimum": 0, "maximum": 65535})


def test_reserved_names_are_not_shadowed():
    declarations = compile_schema({"definitions": {"List": {"type": "string"}}})
    assert "ListSchema" in declarations
    assert "List" not in declarations


def test_enum_with_null_becomes_nullable_literal():
    declarations = compile_schema({"enum": ["a", None]})
    assert declarations["Config"].type == UnionType([LiteralType(["a"]), Primitive("null")])


@pytest.mark.parametrize("schema, message", [
    ({"properties": {"a": False}}, "accept nothing"),
    ({"properties": {"a": {"$ref": "https://example.com/other.json"}}}, "only local"),
    ({"properties": {"a": {"$ref": "#/definitions/Missing"}}}, "unresolved"),
    ({"properties": {"a": {"allOf": [{"type": "string"}, {"type": "integer"}]}}}, "allOf"),
    ({"properties": {"a": {"type": "date"}}}, "unknown type"),
])
def test_unsupported_constructs(schema, message):
    with pytest.raises(UnsupportedSchemaError, match=message):
        compile_schema(schema)


def test_unsupported_construct_reports_location():
    with pytest.raises(UnsupportedSchemaError) as excinfo:
        compile_schema({"definitions": {"Bad": {"properties": {"x": False}}}})
    assert excinfo.value.pointer == "#/definitions/Bad/properties/x"


def test_make_union_flattens_and_merges():
    union = make_union([
        LiteralType(["a"]),
        UnionType([LiteralType(["b"]), Primitive("string")]),
        Primitive("string"),
    ])
    assert union == UnionType([LiteralType(["a", "b"]), Primitive("string")])
    assert make_union([Primitive("string"), Primitive("any")]) == Primitive("any")


def test_render_typed_dicts(declarations):
    source = render_typed_dicts(declarations)
    compile(source, "types.py", "exec")
    assert "class TauriConfig(TypedDict, total=False):" in source
    assert 'Config = TypedDict(\n    "Config",' in source
    assert '"$schema": Optional[str],' in source
    assert "identifier: Required[str]" in source
    assert 'Theme = Literal["Light", "Dark"]' in source
    assert "# System theme." in source


def test_render_typed_dicts_without_comments(declarations):
    source = render_typed_dicts(declarations, keep_comments=False)
    assert "System theme." not in source
    assert "The Tauri configuration object." not in source


def test_root_all_of_next_to_definitions():
    declarations = compile_schema({
        "definitions": {
            "Base": {"type": "object", "required": ["name"], "properties": {"name": {"type": "string"}}},
        },
        "allOf": [{"$ref": "#/definitions/Base"}, {"properties": {"mode": {"type": "string"}}}],
    })
    config = declarations["Config"].type
    assert [f.name for f in config.fields] == ["name", "mode"]
    assert config.get_field("name").required
    assert not config.get_field("mode").required

    single = compile_schema({
        "definitions": {"Base": {"type": "object", "properties": {"name": {"type": "string"}}}},
        "allOf": [{"$ref": "#/definitions/Base"}],
    })
    assert single["Config"].type == Reference("Base")
