"""Entity relationship diagrams: entities, attributes and relationships."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

INDENT = "    "

_DIAGRAM_TYPE = "erDiagram\n"


class DataType(str, Enum):
    """Common attribute types."""

    STRING = "string"
    INTEGER = "int"
    FLOAT = "float"
    BOOLEAN = "boolean"
    DATETIME = "datetime"


class Cardinality(str, Enum):
    """Relationship cardinality markers."""

    ONE_TO_ZERO_OR_MORE = "||--o{"
    ONE_TO_ONE_OR_MORE = "||--|{"
    ONE_TO_EXACTLY_ONE = "||--||"
    ZERO_OR_ONE_TO_MANY = "|o--o{"
    MANY_TO_MANY = "}o--o{"
    ZERO_OR_ONE = "|o"
    EXACTLY_ONE = "||"
    ZERO_OR_MORE = "o{"
    ONE_OR_MORE = "|{"


def _text(value: Enum | str) -> str:
    return value.value if isinstance(value, Enum) else str(value)


@dataclass(eq=False)
class Attribute:
    """A column of an entity."""

    name: str
    type: DataType | str
    primary_key: bool = False
    foreign_key: bool = False
    required: bool = False

    def set_primary_key(self) -> Attribute:
        self.primary_key = True
        return self

    def set_foreign_key(self) -> Attribute:
        self.foreign_key = True
        return self

    def set_required(self) -> Attribute:
        self.required = True
        return self

    def _keys(self) -> str:
        keys = [k for k, on in (("PK", self.primary_key), ("FK", self.foreign_key)) if on]
        return " " + ",".join(keys) if keys else ""

    def __str__(self) -> str:
        return f"{INDENT}{INDENT}{_text(self.type)} {self.name}{self._keys()}\n"


@dataclass(eq=False)
class Entity:
    """A table or entity with an optional alias and attributes."""

    name: str
    alias: str = field(default="", init=False)
    attributes: list[Attribute] = field(default_factory=list, init=False)

    def add_attribute(self, name: str, data_type: DataType | str) -> Attribute:
        """Create an attribute, attach it to this entity and return it."""
        attribute = Attribute(name, data_type)
        self.attributes.append(attribute)
        return attribute

    def set_alias(self, alias: str) -> Entity:
        self.alias = alias
        return self

    def __str__(self) -> str:
        if self.alias:
            header = f"{INDENT}{self.name} [{self.alias}] {{\n"
        else:
            header = f"{INDENT}{self.name} {{\n"
        body = "".join(str(attr) for attr in self.attributes)
        return f"{header}{body}{INDENT}}}\n"


@dataclass(eq=False)
class Relationship:
    """A relationship between two entities."""

    source: Entity
    target: Entity
    label: str = field(default="", init=False)
    cardinality: Cardinality | str = field(default=Cardinality.EXACTLY_ONE, init=False)

    def set_label(self, label: str) -> Relationship:
        self.label = label
        return self

    def set_cardinality(self, cardinality: Cardinality | str) -> Relationship:
        self.cardinality = cardinality
        return self

    def __str__(self) -> str:
        label = self.label or "relates"
        return (
            f"{INDENT}{self.source.name} {_text(self.cardinality)} "
            f"{self.target.name} : {label}\n"
        )


class ErDiagram:
    """An entity relationship diagram."""

    def __init__(self) -> None:
        self.entities: list[Entity] = []
        self.relationships: list[Relationship] = []

    def add_entity(self, name: str) -> Entity:
        entity = Entity(name)
        self.entities.append(entity)
        return entity

    def add_relationship(self, source: Entity, target: Entity) -> Relationship:
        relationship = Relationship(source, target)
        self.relationships.append(relationship)
        return relationship

    def __str__(self) -> str:
        parts = [_DIAGRAM_TYPE]
        parts.extend(str(entity) for entity in self.entities)
        if self.relationships:
            parts.append("\n")
            parts.extend(str(rel) for rel in self.relationships)
        return "".join(parts)

    def render_to_file(self, path: str | Path) -> None:
        """Write the diagram text to the given path."""
        Path(path).write_text(str(self), encoding="utf-8")