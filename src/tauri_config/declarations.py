"""
Structural type declarations produced from a JSON Schema.

A DeclarationSet is the hand-off between the type compiler and the validator
compiler: named declarations whose bodies are small type-expression trees.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional, Set


@dataclass
class TypeExpr:
    def children(self) -> Iterator["TypeExpr"]:
        return iter(())


@dataclass
class Primitive(TypeExpr):
    """string, integer, number, boolean, null or any"""
    kind: str
    constraints: Dict[str, Any] = field(default_factory=dict)


@dataclass
class LiteralType(TypeExpr):
    values: List[Any]


@dataclass
class Reference(TypeExpr):
    name: str


@dataclass
class ArrayType(TypeExpr):
    items: TypeExpr
    min_items: Optional[int] = None
    max_items: Optional[int] = None

    def children(self):
        yield self.items


@dataclass
class TupleType(TypeExpr):
    items: List[TypeExpr]

    def children(self):
        yield from self.items


@dataclass
class MapType(TypeExpr):
    values: TypeExpr

    def children(self):
        yield self.values


@dataclass
class UnionType(TypeExpr):
    options: List[TypeExpr]
    discriminator: Optional[str] = None

    def children(self):
        yield from self.options

    @property
    def nullable(self) -> bool:
        return any(is_null(o) for o in self.options)

    def without_null(self) -> List[TypeExpr]:
        return [o for o in self.options if not is_null(o)]


@dataclass
class FieldDecl:
    name: str
    type: TypeExpr
    required: bool = False
    description: Optional[str] = None


@dataclass
class ObjectType(TypeExpr):
    fields: List[FieldDecl] = field(default_factory=list)
    closed: bool = False

    def children(self):
        for f in self.fields:
            yield f.type

    def get_field(self, name: str) -> Optional[FieldDecl]:
        for f in self.fields:
            if f.name == name:
                return f
        return None


@dataclass
class Declaration:
    name: str
    type: TypeExpr
    description: Optional[str] = None

    @property
    def is_object(self) -> bool:
        return isinstance(self.type, ObjectType)


def is_null(expr: TypeExpr) -> bool:
    return isinstance(expr, Primitive) and expr.kind == "null"


def walk(expr: TypeExpr) -> Iterator[TypeExpr]:
    yield expr
    for child in expr.children():
        yield from walk(child)


def references(expr: TypeExpr) -> List[str]:
    """Names referenced by an expression, in first-use order"""
    seen = []
    for node in walk(expr):
        if isinstance(node, Reference) and node.name not in seen:
            seen.append(node.name)
    return seen


@dataclass
class DeclarationSet:
    root: str
    declarations: Dict[str, Declaration] = field(default_factory=dict)
    origin: Optional[str] = None

    def __contains__(self, name: str) -> bool:
        return name in self.declarations

    def __getitem__(self, name: str) -> Declaration:
        return self.declarations[name]

    def __len__(self) -> int:
        return len(self.declarations)

    def add(self, declaration: Declaration) -> Declaration:
        self.declarations[declaration.name] = declaration
        return declaration

    def unique_name(self, name: str) -> str:
        candidate, counter = name, 2
        while candidate in self.declarations:
            candidate = f"{name}{counter}"
            counter += 1
        return candidate

    def dependencies(self, name: str) -> List[str]:
        return [n for n in references(self.declarations[name].type) if n in self.declarations]

    def ordered(self) -> List[Declaration]:
        """Declarations with dependencies first, starting from the root.

        Cycles are tolerated: a declaration already on the stack is skipped and
        ends up referenced before it is defined.
        """
        result: List[Declaration] = []
        done: Set[str] = set()
        visiting: Set[str] = set()

        def visit(name: str):
            if name in done or name in visiting:
                return
            visiting.add(name)
            for dependency in self.dependencies(name):
                visit(dependency)
            visiting.discard(name)
            done.add(name)
            result.append(self.declarations[name])

        if self.root in self.declarations:
            visit(self.root)
        for name in self.declarations:
            visit(name)
        return result


# Names the generated modules import; declarations must not shadow them.
RESERVED_NAMES = frozenset({
    "Annotated", "Any", "BaseModel", "ConfigDict", "Dict", "Field", "List",
    "Literal", "Optional", "Required", "StrictBool", "StrictFloat", "StrictInt",
    "StrictStr", "Tuple", "TypedDict", "Union",
})
