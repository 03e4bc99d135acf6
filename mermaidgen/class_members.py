"""Fields and methods of classes in a class diagram."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import NamedTuple

INDENT = "    "


class Visibility(str, Enum):
    """Access modifier of a class member."""

    PUBLIC = "+"
    PRIVATE = "-"
    PROTECTED = "#"
    INTERNAL = "~"


class FieldClassifier(str, Enum):
    """Extra modifier of a field."""

    STATIC = "$"


class MethodClassifier(str, Enum):
    """Extra modifier of a method."""

    ABSTRACT = "*"
    STATIC = "$"


class Parameter(NamedTuple):
    """A method parameter."""

    name: str
    type: str


@dataclass
class Field:
    """A class field with a type and visibility."""

    name: str
    type: str
    visibility: Visibility = field(default=Visibility.PUBLIC, init=False)
    classifier: FieldClassifier | None = field(default=None, init=False)

    def set_visibility(self, visibility: Visibility) -> Field:
        self.visibility = Visibility(visibility)
        return self

    def __str__(self) -> str:
        classifier = self.classifier.value if self.classifier else ""
        return f"{INDENT}{self.visibility.value}{self.type} {self.name}{classifier}"


@dataclass
class Method:
    """A class method with parameters and an optional return type."""

    name: str
    parameters: list[Parameter] = field(default_factory=list, init=False)
    return_type: str = field(default="", init=False)
    visibility: Visibility = field(default=Visibility.PUBLIC, init=False)
    classifier: MethodClassifier | None = field(default=None, init=False)

    def set_visibility(self, visibility: Visibility) -> Method:
        self.visibility = Visibility(visibility)
        return self

    def set_return_type(self, return_type: str) -> Method:
        self.return_type = return_type
        return self

    def set_classifier(self, classifier: MethodClassifier) -> Method:
        self.classifier = MethodClassifier(classifier)
        return self

    def add_parameter(self, name: str, type: str) -> None:
        self.parameters.append(Parameter(name, type))

    def __str__(self) -> str:
        params = ",".join(f"{p.name}:{p.type}" for p in self.parameters).strip(",")
        classifier = self.classifier.value if self.classifier else ""
        return (
            f"{INDENT}{self.visibility.value}{self.name}({params})"
            f"{classifier} {self.return_type}"
        )