import pytest

from mermaidgen.erdiagram import (
    Attribute,
    Cardinality,
    DataType,
    Entity,
    ErDiagram,
    Relationship,
)


def test_new_entity():
    entity = Entity("TEST_TABLE")
    assert entity.name == "TEST_TABLE"
    assert entity.attributes == []
    assert entity.alias == ""


def test_entity_set_alias():
    entity = Entity("TEST_TABLE")
    assert entity.set_alias("Test") is entity
    assert entity.alias == "Test"


def test_entity_add_attribute():
    entity = Entity("TEST_TABLE")
    attr = entity.add_attribute("id", DataType.INTEGER)
    assert entity.attributes == [attr]
    assert attr.name == "id"
    assert attr.type is DataType.INTEGER


@pytest.mark.parametrize(
    "setup, pk, fk, req",
    [
        (lambda a: a.set_primary_key(), True, False, False),
        (lambda a: a.set_foreign_key(), False, True, False),
        (lambda a: a.set_required(), False, False, True),
        (lambda a: a.set_primary_key().set_foreign_key().set_required(), True, True, True),
    ],
)
def test_attribute_setters(setup, pk, fk, req):
    attr = Attribute("test", DataType.STRING)
    setup(attr)
    assert (attr.primary_key, attr.foreign_key, attr.required) == (pk, fk, req)


def test_attribute_setter_chains():
    attr = Attribute("test", DataType.STRING)
    assert attr.set_primary_key() is attr
    assert attr.set_foreign_key() is attr
    assert attr.set_required() is attr


def test_entity_string_without_alias():
    entity = Entity("TEST")
    entity.add_attribute("id", DataType.INTEGER).set_primary_key()
    assert str(entity) == "    TEST {\n        int id PK\n    }\n"


def test_entity_string_with_alias():
    entity = Entity("TEST_TABLE")
    entity.set_alias("Test")
    entity.add_attribute("id", DataType.INTEGER).set_foreign_key()
    result = str(entity)
    assert "TEST_TABLE [Test] {" in result
    assert "int id FK" in result
    assert result.endswith("}\n")


def test_entity_string_pk_and_fk():
    entity = Entity("TEST")
    entity.add_attribute("id", DataType.INTEGER).set_primary_key().set_foreign_key()
    assert "int id PK,FK" in str(entity)


def test_entity_string_all_types():
    entity = Entity("TEST")
    entity.add_attribute("id", DataType.INTEGER)
    entity.add_attribute("name", DataType.STRING)
    entity.add_attribute("active", DataType.BOOLEAN)
    entity.add_attribute("price", DataType.FLOAT)
    entity.add_attribute("created", DataType.DATETIME)
    result = str(entity)
    for want in ["int id", "string name", "boolean active", "float price", "datetime created"]:
        assert want in result


def test_required_does_not_add_key_marker():
    entity = Entity("T")
    entity.add_attribute("name", DataType.STRING).set_required()
    assert str(entity) == "    T {\n        string name\n    }\n"


def test_new_relationship():
    src, dst = Entity("FROM"), Entity("TO")
    rel = Relationship(src, dst)
    assert rel.source is src
    assert rel.target is dst
    assert rel.cardinality is Cardinality.EXACTLY_ONE
    assert rel.label == ""


def test_relationship_set_label():
    rel = Relationship(Entity("A"), Entity("B"))
    assert rel.set_label("test_label") is rel
    assert rel.label == "test_label"


def test_relationship_set_cardinality():
    rel = Relationship(Entity("A"), Entity("B"))
    assert rel.set_cardinality(Cardinality.ONE_TO_ZERO_OR_MORE) is rel
    assert rel.cardinality is Cardinality.ONE_TO_ZERO_OR_MORE


def test_relationship_string_default_label():
    rel = Relationship(Entity("A"), Entity("B"))
    assert str(rel) == "    A || B : relates\n"


def test_relationship_string_with_label():
    rel = Relationship(Entity("User"), Entity("Post")).set_label("writes")
    result = str(rel)
    assert "User" in result and "Post" in result and "writes" in result


def test_relationship_string_custom_cardinality():
    rel = Relationship(Entity("Book"), Entity("Author"))
    rel.set_cardinality(Cardinality.MANY_TO_MANY)
    assert str(rel) == "    Book }o--o{ Author : relates\n"


def test_relationship_string_uses_names_not_aliases():
    src = Entity("USERS").set_alias("User")
    dst = Entity("POSTS").set_alias("Post")
    result = str(Relationship(src, dst))
    assert "USERS" in result and "POSTS" in result
    assert "User " not in result


def test_new_diagram():
    diagram = ErDiagram()
    assert diagram.entities == []
    assert diagram.relationships == []


def test_diagram_add_entity():
    diagram = ErDiagram()
    entity = diagram.add_entity("TEST")
    assert diagram.entities == [entity]
    assert entity.name == "TEST"


def test_diagram_add_relationship():
    diagram = ErDiagram()
    a = diagram.add_entity("A")
    b = diagram.add_entity("B")
    rel = diagram.add_relationship(a, b)
    assert diagram.relationships == [rel]
    assert rel.source is a
    assert rel.target is b


def test_empty_diagram_string():
    assert str(ErDiagram()) == "erDiagram\n"


def _complete_diagram():
    d = ErDiagram()
    user = d.add_entity("USER")
    post = d.add_entity("POST")
    user.add_attribute("id", DataType.INTEGER).set_primary_key()
    post.add_attribute("id", DataType.INTEGER).set_primary_key()
    d.add_relationship(user, post).set_label("writes").set_cardinality(
        Cardinality.ONE_TO_ZERO_OR_MORE
    )
    return d


def test_complete_diagram_string():
    result = str(_complete_diagram())
    for want in ["erDiagram", "USER {", "POST {", "writes", "||--o{"]:
        assert want in result
    assert result.endswith("\n    USER ||--o{ POST : writes\n")


def test_render_to_file(tmp_path):
    d = ErDiagram()
    d.add_entity("USER").add_attribute("id", DataType.INTEGER).set_primary_key()
    target = tmp_path / "diagram.md"
    d.render_to_file(target)
    content = target.read_text(encoding="utf-8")
    for want in ["erDiagram", "USER {", "int id PK", "}"]:
        assert want in content
    assert content == str(d)


def test_render_to_missing_directory_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        ErDiagram().render_to_file(tmp_path / "missing" / "diagram.md")