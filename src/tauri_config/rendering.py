"""
Turns type expressions into Python annotation source.

ExpressionRenderer keeps track of what it had to import while rendering, and of
which declarations are already defined so that anything later in the module
is emitted as a quoted forward reference.
"""

import json
from typing import Dict, List, Set, Tuple

from .declarations import (
    ArrayType, DeclarationSet, LiteralType, MapType, Primitive, Reference,
    TupleType, TypeExpr, UnionType,
)

MODULE_ORDER = ("typing", "typing_extensions", "pydantic")


class ExpressionRenderer:
    # kind -> (module, name); an empty module means a builtin
    primitives: Dict[str, Tuple[str, str]] = {}

    def __init__(self, declarations: DeclarationSet):
        self.declarations = declarations
        self.imports: Dict[str, Set[str]] = {}
        self.defined: Set[str] = set()
        self.forward_refs = False

    def use(self, module: str, name: str) -> str:
        if module:
            self.imports.setdefault(module, set()).add(name)
        return name

    def define(self, name: str):
        self.defined.add(name)

    def render(self, expr: TypeExpr) -> str:
        if isinstance(expr, Primitive):
            return self.primitive(expr)
        if isinstance(expr, LiteralType):
            return self.literal(expr.values)
        if isinstance(expr, Reference):
            return self.reference(expr.name)
        if isinstance(expr, ArrayType):
            return self.array(expr)
        if isinstance(expr, TupleType):
            return self.tuple(expr)
        if isinstance(expr, MapType):
            return f"{self.use('typing', 'Dict')}[str, {self.render(expr.values)}]"
        if isinstance(expr, UnionType):
            return self.union(expr)
        raise TypeError(f"cannot render {type(expr).__name__}")

    def primitive(self, expr: Primitive) -> str:
        if expr.kind == "any":
            return self.use("typing", "Any")
        if expr.kind == "null":
            return "None"
        module, name = self.primitives[expr.kind]
        return self.use(module, name)

    def literal(self, values: List) -> str:
        rendered = ", ".join(self.literal_value(v) for v in values)
        return f"{self.use('typing', 'Literal')}[{rendered}]"

    @staticmethod
    def literal_value(value) -> str:
        if isinstance(value, str):
            return json.dumps(value, ensure_ascii=False)
        return repr(value)

    def reference(self, name: str) -> str:
        if name in self.defined:
            return name
        self.forward_refs = True
        return f'"{name}"'

    def array(self, expr: ArrayType) -> str:
        return f"{self.use('typing', 'List')}[{self.render(expr.items)}]"

    def tuple(self, expr: TupleType) -> str:
        items = ", ".join(self.render(item) for item in expr.items) or "()"
        return f"{self.use('typing', 'Tuple')}[{items}]"

    def union(self, expr: UnionType) -> str:
        options = [self.render(option) for option in expr.without_null()]
        if not options:
            return "None"
        inner = options[0] if len(options) == 1 else f"{self.use('typing', 'Union')}[{', '.join(options)}]"
        if expr.nullable:
            return f"{self.use('typing', 'Optional')}[{inner}]"
        return inner

    def import_lines(self) -> List[str]:
        modules = sorted(self.imports, key=lambda m: (MODULE_ORDER.index(m) if m in MODULE_ORDER else len(MODULE_ORDER), m))
        return [f"from {module} import {', '.join(sorted(self.imports[module]))}" for module in modules]
