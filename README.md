# mermaidgen

Build Mermaid diagram source text from ordinary Python objects.
The package has no runtime dependencies.

It supports three kinds of diagram:

- block diagrams (`mermaidgen.block`)
- class diagrams (`mermaidgen.classdiagram`, with fields and methods from `mermaidgen.class_members`)
- entity-relationship diagrams (`mermaidgen.erdiagram`)

Each diagram object gives its Mermaid text through `str()`. Its `render_to_file(path)` method writes the same text to a file as UTF-8.

## Installation

```
pip install .
```

## Block diagrams

```python
from mermaidgen.block import BlockDiagram, BlockShape, ArrowDirection

diagram = BlockDiagram().set_columns(3)
start = diagram.add_block("Start").set_shape(BlockShape.ROUND_EDGES)
diagram.add_space(1)
end = diagram.add_block("End").set_arrow(ArrowDirection.RIGHT)
diagram.add_link(start, end).set_text("goes to")

print(diagram)
diagram.render_to_file("blocks.md")
```

Blocks get the identifiers `"0"`, `"1"`, … in the order they are made. `reset_ids()` starts the count from `"0"` again.

A block becomes a group when you nest blocks in it with `Block.add_block`. Use `set_columns`, `add_column` and `remove_column` to set how many columns its children take. `set_width` sets how many columns a block spans, and `set_style` adds a `style` line. `add_space(width)` adds a spacer; a width of 0 gives a plain `space`. `block_arrow_shape(text, *directions)` returns the arrow text on its own.

## Class diagrams

```python
from mermaidgen.classdiagram import (
    ClassDiagram, ClassAnnotation, Direction, RelationType, Cardinality,
)
from mermaidgen.class_members import Visibility, MethodClassifier

diagram = ClassDiagram().set_direction(Direction.LEFT_RIGHT)
shapes = diagram.add_namespace("Shapes")

shape = diagram.add_class("Shape", shapes).set_annotation(ClassAnnotation.ABSTRACT)
area = shape.add_method("area").set_return_type("float")
area.set_classifier(MethodClassifier.ABSTRACT)

circle = diagram.add_class("Circle", None)
circle.add_field("radius", "float").set_visibility(Visibility.PRIVATE)

relation = diagram.add_relation(shape, circle)
relation.relation_to_a = RelationType.INHERITANCE_LEFT
relation.cardinality_to_b = Cardinality.MANY
relation.label = "specialised by"

diagram.add_note("Areas are in square units", circle)
print(diagram)
```

Notes come first in the output, then namespaces, then top-level classes, then relations. A namespace with no classes gives no output. Nested namespaces made with `Namespace.add_namespace` are kept on the object but are not written out.

## Entity-relationship diagrams

```python
from mermaidgen.erdiagram import ErDiagram, DataType, Cardinality

diagram = ErDiagram()
user = diagram.add_entity("USER")
post = diagram.add_entity("POST").set_alias("Post")
user.add_attribute("id", DataType.INTEGER).set_primary_key()
post.add_attribute("author_id", DataType.INTEGER).set_foreign_key()

diagram.add_relationship(user, post).set_label("writes").set_cardinality(
    Cardinality.ONE_TO_ZERO_OR_MORE
)
print(diagram)
```

A relationship without a label is written with the label `relates`, and its cardinality is `Cardinality.EXACTLY_ONE` until you set another.

## What it does not do

The package writes diagram text only. It has no title, front matter or theme and layout configuration for diagrams. It does not draw diagrams to images, and it does not parse Mermaid text back into objects.

## Running the tests

```
pip install .[test]
pytest
```