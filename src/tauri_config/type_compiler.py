"""
JSON Schema to structural type declarations.

Walks a JSON Schema document (draft-07 style `definitions` or 2019+ `$defs`)
and produces a DeclarationSet: one declaration for the root schema, one per
definition, plus one for every anonymous object that has to become a named
type (nested objects and union variants).
"""

import keyword
from typing import Any, Dict, List, Optional

from .common import UnsupportedSchemaError, logger
from .declarations import (
    RESERVED_NAMES, ArrayType, Declaration, DeclarationSet, FieldDecl, LiteralType,
    MapType, ObjectType, Primitive, Reference, TupleType, TypeExpr, UnionType,
)
from .rendering import ExpressionRenderer
from .template_renderer import get_template_renderer
from .utils import pascal_case, python_identifier

DEFINITION_PREFIXES = ("#/definitions/", "#/$defs/")

ANNOTATION_KEYWORDS = frozenset({
    "$comment", "$id", "$schema", "default", "deprecated", "description",
    "examples", "readOnly", "title", "writeOnly",
})

# Definition tables never constrain the instance
CONTAINER_KEYWORDS = frozenset({"definitions", "$defs"})

INTEGER_FORMAT_BOUNDS = {
    "int8": (-2 ** 7, 2 ** 7 - 1),
    "int16": (-2 ** 15, 2 ** 15 - 1),
    "int32": (-2 ** 31, 2 ** 31 - 1),
    "int64": (-2 ** 63, 2 ** 63 - 1),
    "uint": (0, None),
    "uint8": (0, 2 ** 8 - 1),
    "uint16": (0, 2 ** 16 - 1),
    "uint32": (0, 2 ** 32 - 1),
    "uint64": (0, 2 ** 64 - 1),
}

NUMBER_CONSTRAINTS = ("minimum", "maximum", "exclusiveMinimum", "exclusiveMaximum", "multipleOf")
STRING_CONSTRAINTS = ("minLength", "maxLength", "pattern")
PRIMITIVE_TYPES = ("string", "integer", "number", "boolean", "null")


class SchemaCompiler:
    def __init__(self, document: Dict[str, Any], root_name: str = "config", origin: Optional[str] = None):
        if not isinstance(document, dict):
            raise UnsupportedSchemaError("the schema document must be a JSON object")
        self.document = document
        self.definitions: Dict[str, Any] = {}
        self.definitions.update(document.get("$defs") or {})
        self.definitions.update(document.get("definitions") or {})

        self.result = DeclarationSet(root=self._class_name(root_name, set()), origin=origin)
        self.names: Dict[str, str] = {}
        self._reserved = {self.result.root}
        for key in self.definitions:
            self.names[key] = self._class_name(key, self._reserved)
            self._reserved.add(self.names[key])

    def compile(self) -> DeclarationSet:
        self._declare(self.result.root, self.document, "#")
        for key, schema in self.definitions.items():
            self._declare(self.names[key], schema, f"#/definitions/{key}")
        logger().debug(f"Compiled {len(self.result)} declarations")
        return self.result

    @staticmethod
    def _class_name(raw: str, taken) -> str:
        name = pascal_case(raw)
        if name in RESERVED_NAMES:
            name += "Schema"
        candidate, counter = name, 2
        while candidate in taken:
            candidate = f"{name}{counter}"
            counter += 1
        return candidate

    def _declare(self, name: str, schema: Any, pointer: str):
        expr = self._compile(schema, name, pointer, top=True)
        description = schema.get("description") if isinstance(schema, dict) else None
        self.result.add(Declaration(name, expr, description))

    def _hoist(self, hint: str, expr: TypeExpr, description: Optional[str]) -> Reference:
        name = self._class_name(hint, set(self.result.declarations) | self._reserved)
        self._reserved.add(name)
        self.result.add(Declaration(name, expr, description))
        return Reference(name)

    def _compile(self, schema: Any, hint: str, pointer: str, top: bool = False) -> TypeExpr:
        if schema is True:
            return Primitive("any")
        if schema is False:
            raise UnsupportedSchemaError("'false' schemas accept nothing and cannot be represented", pointer)
        if not isinstance(schema, dict):
            raise UnsupportedSchemaError(f"expected a schema object, got {type(schema).__name__}", pointer)

        if "$ref" in schema:
            return self._reference(schema["$ref"], pointer)
        if "allOf" in schema:
            return self._all_of(schema, hint, pointer, top)
        for key in ("anyOf", "oneOf"):
            if key in schema:
                return self._union(schema[key], hint, f"{pointer}/{key}")
        if "const" in schema:
            return self._literals([schema["const"]])
        if "enum" in schema:
            return self._literals(list(schema["enum"]))

        types = schema.get("type")
        if isinstance(types, list):
            options = [self._compile({**schema, "type": t}, hint, pointer) for t in types]
            return make_union(options)
        if types is None:
            if "properties" in schema or "additionalProperties" in schema:
                types = "object"
            elif "items" in schema or "prefixItems" in schema:
                types = "array"
            else:
                return Primitive("any")

        if types == "object":
            return self._object(schema, hint, pointer, top)
        if types == "array":
            return self._array(schema, hint, pointer)
        if types in PRIMITIVE_TYPES:
            return Primitive(types, self._constraints(schema, types))
        raise UnsupportedSchemaError(f"unknown type {types!r}", pointer)

    def _reference(self, ref: str, pointer: str) -> Reference:
        if ref == "#":
            return Reference(self.result.root)
        for prefix in DEFINITION_PREFIXES:
            if ref.startswith(prefix):
                key = ref[len(prefix):].replace("~1", "/").replace("~0", "~")
                if key not in self.definitions:
                    raise UnsupportedSchemaError(f"unresolved reference {ref}", pointer)
                return Reference(self.names[key])
        raise UnsupportedSchemaError(f"only local definition references are supported, got {ref}", pointer)

    def _resolve(self, schema: Any, pointer: str) -> Any:
        seen = set()
        while isinstance(schema, dict) and "$ref" in schema:
            ref = schema["$ref"]
            if ref in seen:
                raise UnsupportedSchemaError(f"reference cycle through {ref}", pointer)
            seen.add(ref)
            name = self._reference(ref, pointer).name
            keys = [k for k, v in self.names.items() if v == name]
            schema = self.definitions[keys[0]] if keys else self.document
        return schema

    def _literals(self, values: List[Any]) -> TypeExpr:
        literals = [v for v in values if v is not None]
        for value in literals:
            if not isinstance(value, (str, int, float, bool)):
                raise UnsupportedSchemaError(f"only scalar enum values are supported, got {value!r}")
        if len(literals) == len(values):
            return LiteralType(literals)
        if not literals:
            return Primitive("null")
        return UnionType([LiteralType(literals), Primitive("null")])

    def _all_of(self, schema: Dict[str, Any], hint: str, pointer: str, top: bool) -> TypeExpr:
        members = list(schema["allOf"])
        siblings = {
            k: v for k, v in schema.items()
            if k != "allOf" and k not in ANNOTATION_KEYWORDS and k not in CONTAINER_KEYWORDS
        }
        if len(members) == 1 and not siblings:
            return self._compile(members[0], hint, f"{pointer}/allOf/0", top)
        if siblings:
            members.append(siblings)

        merged: Dict[str, Any] = {"type": "object", "properties": {}, "required": []}
        for index, member in enumerate(members):
            resolved = self._resolve(member, f"{pointer}/allOf/{index}")
            if not isinstance(resolved, dict) or not _is_object_schema(resolved):
                raise UnsupportedSchemaError("allOf is only supported between object schemas", f"{pointer}/allOf/{index}")
            merged["properties"].update(resolved.get("properties") or {})
            merged["required"].extend(r for r in resolved.get("required") or [] if r not in merged["required"])
            if resolved.get("additionalProperties") is False:
                merged["additionalProperties"] = False
        if "description" in schema:
            merged["description"] = schema["description"]
        return self._compile(merged, hint, pointer, top)

    def _union(self, members: List[Any], hint: str, pointer: str) -> TypeExpr:
        variants = [m for m in members if not _is_null_schema(m)]
        nullable = len(variants) < len(members)
        discriminator = self._find_discriminator(variants, pointer)
        inline_objects = sum(1 for m in variants if isinstance(m, dict) and "$ref" not in m and _is_object_schema(m))

        options = []
        for index, member in enumerate(members):
            if _is_null_schema(member):
                continue
            if discriminator:
                tag = _tag_value(self._resolve(member, pointer), discriminator)
                member_hint = hint + pascal_case(str(tag))
            elif inline_objects == 1:
                member_hint = hint + "Object"
            else:
                member_hint = f"{hint}Variant{index + 1}"
            options.append(self._compile(member, member_hint, f"{pointer}/{index}"))

        if discriminator:
            union: TypeExpr = UnionType(options, discriminator)
            return UnionType([union, Primitive("null")]) if nullable else union
        if nullable:
            options.append(Primitive("null"))
        return make_union(options)

    def _find_discriminator(self, variants: List[Any], pointer: str) -> Optional[str]:
        if len(variants) < 2:
            return None
        resolved = [self._resolve(v, pointer) for v in variants]
        if not all(isinstance(r, dict) and _is_object_schema(r) for r in resolved):
            return None
        for candidate in resolved[0].get("properties") or {}:
            tags = [_tag_value(r, candidate) for r in resolved]
            if all(isinstance(t, str) for t in tags) and len(set(tags)) == len(tags):
                return candidate
        return None

    def _object(self, schema: Dict[str, Any], hint: str, pointer: str, top: bool) -> TypeExpr:
        properties = schema.get("properties") or {}
        additional = schema.get("additionalProperties", True)
        if not properties:
            if isinstance(additional, dict):
                return MapType(self._compile(additional, hint + "Value", f"{pointer}/additionalProperties"))
            if additional is not False:
                return MapType(Primitive("any"))

        required = set(schema.get("required") or [])
        fields = []
        for prop, subschema in properties.items():
            field_hint = hint + pascal_case(python_identifier(prop))
            fields.append(FieldDecl(
                name=prop,
                type=self._compile(subschema, field_hint, f"{pointer}/properties/{prop}"),
                required=prop in required,
                description=subschema.get("description") if isinstance(subschema, dict) else None,
            ))

        obj = ObjectType(fields, closed=additional is False)
        if top:
            return obj
        return self._hoist(hint, obj, schema.get("description"))

    def _array(self, schema: Dict[str, Any], hint: str, pointer: str) -> TypeExpr:
        tuple_items = schema.get("prefixItems")
        if tuple_items is None and isinstance(schema.get("items"), list):
            tuple_items = schema["items"]
        if tuple_items is not None:
            return TupleType([
                self._compile(item, f"{hint}Item{index + 1}", f"{pointer}/items/{index}")
                for index, item in enumerate(tuple_items)
            ])
        items = self._compile(schema.get("items", True), hint + "Item", f"{pointer}/items")
        return ArrayType(items, schema.get("minItems"), schema.get("maxItems"))

    @staticmethod
    def _constraints(schema: Dict[str, Any], kind: str) -> Dict[str, Any]:
        constraints: Dict[str, Any] = {}
        if kind in ("integer", "number"):
            bounds = INTEGER_FORMAT_BOUNDS.get(schema.get("format")) if kind == "integer" else None
            if bounds:
                constraints["minimum"], constraints["maximum"] = bounds
            for key in NUMBER_CONSTRAINTS:
                if key in schema:
                    value = schema[key]
                    if kind == "integer" and isinstance(value, float) and value.is_integer():
                        value = int(value)
                    constraints[key] = value
        elif kind == "string":
            for key in STRING_CONSTRAINTS:
                if key in schema:
                    constraints[key] = schema[key]
        return {k: v for k, v in constraints.items() if v is not None}


def _is_null_schema(schema: Any) -> bool:
    return isinstance(schema, dict) and schema.get("type") == "null" and len(set(schema) - ANNOTATION_KEYWORDS) == 1


def _is_object_schema(schema: Dict[str, Any]) -> bool:
    return schema.get("type") == "object" or "properties" in schema


def _tag_value(schema: Any, prop: str) -> Optional[str]:
    if not isinstance(schema, dict) or prop not in (schema.get("required") or []):
        return None
    tag_schema = (schema.get("properties") or {}).get(prop)
    if not isinstance(tag_schema, dict):
        return None
    if "const" in tag_schema:
        return tag_schema["const"]
    enum = tag_schema.get("enum")
    if isinstance(enum, list) and len(enum) == 1:
        return enum[0]
    return None


def make_union(options: List[TypeExpr], discriminator: Optional[str] = None) -> TypeExpr:
    """Flatten nested plain unions, merge literal sets and drop duplicates."""
    flat: List[TypeExpr] = []
    for option in options:
        if isinstance(option, UnionType) and not option.discriminator:
            flat.extend(option.options)
        else:
            flat.append(option)

    literal_values: List[Any] = []
    for option in flat:
        if isinstance(option, LiteralType):
            literal_values.extend(v for v in option.values if v not in literal_values)

    merged: List[TypeExpr] = []
    for option in flat:
        if isinstance(option, LiteralType):
            option = LiteralType(literal_values)
        if option not in merged:
            merged.append(option)

    if any(isinstance(o, Primitive) and o.kind == "any" for o in merged):
        return Primitive("any")
    if len(merged) == 1:
        return merged[0]
    return UnionType(merged, discriminator)


def compile_schema(document: Dict[str, Any], root_name: str = "config", origin: Optional[str] = None) -> DeclarationSet:
    """Compile a JSON Schema document into a DeclarationSet"""
    return SchemaCompiler(document, root_name, origin).compile()


class TypedDictRenderer(ExpressionRenderer):
    primitives = {
        "string": ("", "str"),
        "integer": ("", "int"),
        "number": ("", "float"),
        "boolean": ("", "bool"),
    }


def render_typed_dicts(declarations: DeclarationSet, keep_comments: bool = True) -> str:
    """Render the declarations as a module of TypedDicts and type aliases"""
    renderer = TypedDictRenderer(declarations)
    blocks = []
    for declaration in declarations.ordered():
        doc = declaration.description if keep_comments else None
        if isinstance(declaration.type, ObjectType):
            fields = []
            for f in declaration.type.fields:
                annotation = renderer.render(f.type)
                if f.required:
                    annotation = f"{renderer.use('typing_extensions', 'Required')}[{annotation}]"
                fields.append({
                    "key": f.name,
                    "literal": renderer.literal_value(f.name),
                    "annotation": annotation,
                    "doc": f.description if keep_comments else None,
                })
            renderer.use("typing_extensions", "TypedDict")
            functional = any(not f["key"].isidentifier() or keyword.iskeyword(f["key"]) for f in fields)
            blocks.append({"kind": "typeddict", "name": declaration.name, "doc": doc, "fields": fields, "functional": functional})
        else:
            blocks.append({"kind": "alias", "name": declaration.name, "doc": doc, "expr": renderer.render(declaration.type)})
        renderer.define(declaration.name)

    return get_template_renderer().render_file("types.py.j2", {
        "origin": declarations.origin,
        "imports": renderer.import_lines(),
        "blocks": blocks,
    })
