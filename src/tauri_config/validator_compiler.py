"""
Structural declarations to pydantic validator source.

Every object declaration becomes a pydantic model, every other declaration a
module-level type alias. Primitive types are strict so that JSON values are
never coerced (`"true"` is not a boolean and `1` is not a string).
"""

import keyword
from typing import Any, Dict, List, Set

from pydantic import BaseModel

from .common import logger
from .declarations import ArrayType, DeclarationSet, ObjectType, Primitive, Reference, UnionType
from .rendering import ExpressionRenderer
from .template_renderer import get_template_renderer
from .utils import python_identifier

# Attribute names a model field must not take
RESERVED_ATTRIBUTES = frozenset(dir(BaseModel)) | frozenset(keyword.kwlist) | {"str", "float", "int", "bool"}

NUMBER_FIELD_ARGS = {
    "minimum": "ge",
    "maximum": "le",
    "exclusiveMinimum": "gt",
    "exclusiveMaximum": "lt",
    "multipleOf": "multiple_of",
}
STRING_FIELD_ARGS = {
    "minLength": "min_length",
    "maxLength": "max_length",
    "pattern": "pattern",
}


class PydanticRenderer(ExpressionRenderer):
    primitives = {
        "string": ("pydantic", "StrictStr"),
        "integer": ("pydantic", "StrictInt"),
        "number": ("pydantic", "StrictFloat"),
        "boolean": ("pydantic", "StrictBool"),
    }

    def primitive(self, expr: Primitive) -> str:
        annotation = super().primitive(expr)
        mapping = STRING_FIELD_ARGS if expr.kind == "string" else NUMBER_FIELD_ARGS
        # draft-04 boolean exclusive bounds carry no value of their own
        args = {
            mapping[key]: value for key, value in expr.constraints.items()
            if key in mapping and not isinstance(value, bool)
        }
        return self.annotated(annotation, args)

    def array(self, expr: ArrayType) -> str:
        annotation = super().array(expr)
        args = {"min_length": expr.min_items, "max_length": expr.max_items}
        return self.annotated(annotation, {k: v for k, v in args.items() if v is not None})

    def union(self, expr: UnionType) -> str:
        if not expr.discriminator or not self._is_model_union(expr):
            return super().union(expr)
        options = [self.render(option) for option in expr.without_null()]
        tag = self.tag_attribute(expr)
        inner = self.annotated(f"{self.use('typing', 'Union')}[{', '.join(options)}]", {"discriminator": tag})
        if expr.nullable:
            return f"{self.use('typing', 'Optional')}[{inner}]"
        return inner

    def _is_model_union(self, expr: UnionType) -> bool:
        return all(
            isinstance(option, Reference)
            and option.name in self.declarations
            and self.declarations[option.name].is_object
            for option in expr.without_null()
        )

    def tag_attribute(self, expr: UnionType) -> str:
        first = self.declarations[expr.without_null()[0].name].type
        return attribute_names(first)[expr.discriminator]

    def annotated(self, annotation: str, args: Dict[str, Any]) -> str:
        if not args:
            return annotation
        rendered = ", ".join(f"{key}={self.literal_value(value)}" for key, value in args.items())
        return f"{self.use('typing', 'Annotated')}[{annotation}, {self.use('pydantic', 'Field')}({rendered})]"


def attribute_names(obj: ObjectType) -> Dict[str, str]:
    """Python attribute name for every wire name of an object, unique within it"""
    names: Dict[str, str] = {}
    taken: Set[str] = set()
    for f in obj.fields:
        name = python_identifier(f.name, RESERVED_ATTRIBUTES)
        candidate, counter = name, 2
        while candidate in taken:
            candidate = f"{name}_{counter}"
            counter += 1
        taken.add(candidate)
        names[f.name] = candidate
    return names


def _field_line(renderer: PydanticRenderer, attribute: str, wire_name: str, annotation: str, required: bool) -> str:
    # None defaults are never validated; null input needs a nullable type
    args = []
    if attribute != wire_name:
        if not required:
            args.append("default=None")
        args.append(f"alias={renderer.literal_value(wire_name)}")
        return f"{attribute}: {annotation} = {renderer.use('pydantic', 'Field')}({', '.join(args)})"
    if not required:
        return f"{attribute}: {annotation} = None"
    return f"{attribute}: {annotation}"


def compile_validators(declarations: DeclarationSet, module_name: str = "tauri-config", keep_comments: bool = True) -> str:
    """Render a module of pydantic models validating the given declarations"""
    renderer = PydanticRenderer(declarations)
    blocks: List[Dict[str, Any]] = []
    rebuild: List[str] = []
    bases: Set[str] = set()

    for declaration in declarations.ordered():
        renderer.forward_refs = False
        doc = declaration.description if keep_comments else None

        if isinstance(declaration.type, ObjectType):
            names = attribute_names(declaration.type)
            fields = []
            for f in declaration.type.fields:
                line = _field_line(renderer, names[f.name], f.name, renderer.render(f.type), f.required)
                fields.append({"line": line, "doc": f.description if keep_comments else None})
            base = "_ClosedModel" if declaration.type.closed else "_OpenModel"
            bases.add(base)
            blocks.append({
                "kind": "model",
                "name": declaration.name,
                "base": base,
                "doc": doc,
                "fields": fields,
                "protected": any(n.startswith("model_") for n in names.values()),
            })
            if renderer.forward_refs:
                rebuild.append(declaration.name)
        else:
            blocks.append({"kind": "alias", "name": declaration.name, "doc": doc, "expr": renderer.render(declaration.type)})
        renderer.define(declaration.name)

    if bases:
        renderer.use("pydantic", "BaseModel")
        renderer.use("pydantic", "ConfigDict")
    if "_OpenModel" in bases:
        bases.add("_ClosedModel")

    logger().debug(f"Rendered {len(blocks)} validators, {len(rebuild)} need a rebuild")
    return get_template_renderer().render_file("validators.py.j2", {
        "module_name": module_name,
        "origin": declarations.origin,
        "imports": renderer.import_lines(),
        "bases": bases,
        "blocks": blocks,
        "rebuild": rebuild,
    })
