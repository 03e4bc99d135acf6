"""Class diagrams: classes, namespaces, notes and relations."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from mermaidgen.class_members import Field, Method

INDENT = "    "

_DIAGRAM_TYPE = "classDiagram\n"


class ClassAnnotation(str, Enum):
    """Annotation shown above a class's members."""

    NONE = ""
    INTERFACE = "<<Interface>>"
    ABSTRACT = "<<Abstract>>"
    SERVICE = "<<Service>>"
    ENUMERATION = "<<Enumeration>>"


class Direction(str, Enum):
    """Layout direction of a class diagram."""

    TOP_TO_BOTTOM = "TB"
    BOTTOM_UP = "BT"
    RIGHT_LEFT = "RL"
    LEFT_RIGHT = "LR"


class RelationType(str, Enum):
    """Marker drawn at one end of a relation."""

    ASSOCIATION = ">"
    ASSOCIATION_LEFT = "<"
    INHERITANCE = "|>"
    INHERITANCE_LEFT = "<|"
    COMPOSITION = "*"
    AGGREGATION = "o"


class RelationLink(str, Enum):
    """Line style of a relation."""

    SOLID = "--"
    DASHED = ".."


class Cardinality(str, Enum):
    """Multiplicity shown at one end of a relation."""

    ONLY_ONE = '"1"'
    ZERO_OR_ONE = '"0..1"'
    ONE_OR_MORE = '"1..*"'
    MANY = '"*"'
    N = '"n"'
    ZERO_TO_N = '"0..n"'
    ONE_TO_N = '"1..n"'


def _text(value: Enum | None) -> str:
    return value.value if value is not None else ""


@dataclass(eq=False)
class Class:
    """A class with an optional label, annotation, fields and methods."""

    name: str
    label: str = field(default="", init=False)
    annotation: ClassAnnotation = field(default=ClassAnnotation.NONE, init=False)
    methods: list[Method] = field(default_factory=list, init=False)
    fields: list[Field] = field(default_factory=list, init=False)

    def set_label(self, label: str) -> Class:
        self.label = label
        return self

    def set_annotation(self, annotation: ClassAnnotation) -> Class:
        self.annotation = ClassAnnotation(annotation)
        return self

    def add_method(self, name: str) -> Method:
        """Create a method, attach it to this class and return it."""
        method = Method(name)
        self.methods.append(method)
        return method

    def add_field(self, name: str, type: str) -> Field:
        """Create a field, attach it to this class and return it."""
        new_field = Field(name, type)
        self.fields.append(new_field)
        return new_field

    def render(self, indent: str = "") -> str:
        """Return the class text with every line prefixed by ``indent``."""
        label = f'["{self.label}"]' if self.label else ""
        lines = [f"{INDENT}class {self.name}{label}{{\n"]
        if self.annotation is not ClassAnnotation.NONE and self.annotation:
            lines.append(f"{INDENT}{self.annotation.value}\n")
        lines.extend(f"{INDENT}{member}\n" for member in self.fields)
        lines.extend(f"{INDENT}{member}\n" for member in self.methods)
        lines.append(f"{INDENT}}}\n")
        return "".join(indent + line for line in lines)

    def __str__(self) -> str:
        return self.render()


@dataclass(eq=False)
class Namespace:
    """A named group of classes, possibly with nested namespaces."""

    name: str
    classes: list[Class] = field(default_factory=list, init=False)
    children: list[Namespace] = field(default_factory=list, init=False)

    def add_class(self, cls: Class) -> None:
        self.classes.append(cls)

    def add_namespace(self, name: str) -> Namespace:
        """Create a nested namespace and return it."""
        child = Namespace(name)
        self.children.append(child)
        return child

    def render(self, indent: str = "") -> str:
        """Return the namespace text; an empty namespace renders as nothing."""
        if not self.classes:
            return ""
        parts = [f"{INDENT}namespace {self.name}{{\n"]
        parts.extend(cls.render(indent + INDENT) for cls in self.classes)
        parts.append(f"{INDENT}}}\n")
        return "".join(parts)

    def __str__(self) -> str:
        return self.render()


@dataclass(eq=False)
class Note:
    """A note on the whole diagram or on one class."""

    text: str
    cls: Class | None = None

    def __str__(self) -> str:
        if self.cls is None:
            return f'{INDENT}note "{self.text}"\n'
        return f'{INDENT}note for {self.cls.name} "{self.text}"\n'


@dataclass(eq=False)
class Relation:
    """A relation between two classes."""

    class_a: Class
    class_b: Class
    relation_to_a: RelationType | None = field(default=None, init=False)
    relation_to_b: RelationType | None = field(default=None, init=False)
    cardinality_to_a: Cardinality | None = field(default=None, init=False)
    cardinality_to_b: Cardinality | None = field(default=None, init=False)
    link: RelationLink = field(default=RelationLink.SOLID, init=False)
    label: str = field(default="", init=False)

    def __str__(self) -> str:
        label = f" : {self.label}" if self.label else ""
        return (
            f"{INDENT}{self.class_a.name} "
            f"{_text(self.cardinality_to_a)}{_text(self.relation_to_a)}"
            f"{self.link.value}"
            f"{_text(self.relation_to_b)}{_text(self.cardinality_to_b)} "
            f"{self.class_b.name}{label}\n"
        )


class ClassDiagram:
    """A class diagram holding namespaces, notes, classes and relations."""

    def __init__(self) -> None:
        self.direction = Direction.TOP_TO_BOTTOM
        self.namespaces: list[Namespace] = []
        self.notes: list[Note] = []
        self.classes: list[Class] = []
        self.relations: list[Relation] = []

    def set_direction(self, direction: Direction) -> ClassDiagram:
        self.direction = Direction(direction)
        return self

    def add_namespace(self, name: str) -> Namespace:
        namespace = Namespace(name)
        self.namespaces.append(namespace)
        return namespace

    def add_note(self, text: str, cls: Class | None = None) -> None:
        self.notes.append(Note(text, cls))

    def add_class(self, name: str, namespace: Namespace | None = None) -> Class:
        """Create a class in the given namespace, or at top level if none."""
        new_class = Class(name)
        if namespace is None:
            self.classes.append(new_class)
        else:
            namespace.add_class(new_class)
        return new_class

    def add_relation(self, class_a: Class, class_b: Class) -> Relation:
        relation = Relation(class_a, class_b)
        self.relations.append(relation)
        return relation

    def __str__(self) -> str:
        parts = [_DIAGRAM_TYPE, f"{INDENT}direction {self.direction.value}\n"]
        parts.extend(str(note) for note in self.notes)
        parts.extend(ns.render("") for ns in self.namespaces)
        parts.extend(cls.render("") for cls in self.classes)
        parts.extend(str(rel) for rel in self.relations)
        return "".join(parts)

    def render_to_file(self, path: str | Path) -> None:
        """Write the diagram text to the given path."""
        Path(path).write_text(str(self), encoding="utf-8")