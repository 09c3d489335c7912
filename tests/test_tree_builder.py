import json

from apidoc_swagger.parser.base import AnnotatedField
from apidoc_swagger.schema.registry import DefinitionRegistry
from apidoc_swagger.schema.tree import build_definition_tree


def _field(field: str, type: str | None = "String", optional: bool = False, description: str = "") -> AnnotatedField:
    return AnnotatedField(field=field, type=type, optional=optional, description=description)


USER_FIELDS = [
    _field("user", "Object"),
    _field("user.name", "String"),
    _field("user.age", "Number", optional=True),
    _field("user.address", "Object"),
    _field("user.address.city", "String"),
    _field("user.address.zip", "String", optional=True),
]


class TestTopLevel:
    def test_object_first_row_names_the_tree(self):
        registry = DefinitionRegistry()
        tree = build_definition_tree(USER_FIELDS, registry, "GetUserSuccess200", "GetUserSuccess200")
        assert tree.top_level_ref == "user"
        assert tree.top_level_ref_type == "Object"
        assert "GetUserSuccess200" not in registry

    def test_array_first_row_marks_array(self):
        registry = DefinitionRegistry()
        fields = [_field("items", "Array"), _field("items.price", "Number")]
        tree = build_definition_tree(fields, registry, "ListItems", "ListItems")
        assert tree.top_level_ref == "items"
        assert tree.top_level_ref_type == "array"
        assert registry["items"].properties == {"price": {"type": "number", "description": ""}}

    def test_scalar_first_row_uses_default_container(self):
        registry = DefinitionRegistry()
        tree = build_definition_tree([_field("id", "String")], registry, "Created", "CreatedDefault")
        assert tree.top_level_ref == "CreatedDefault"
        assert tree.top_level_ref_type == "String"
        assert registry["CreatedDefault"].properties["id"] == {"type": "string", "description": ""}

    def test_missing_type_is_empty_ref_type(self):
        registry = DefinitionRegistry()
        tree = build_definition_tree([_field("id", None)], registry, "X", "X")
        assert tree.top_level_ref_type == ""
        assert registry["X"].properties["id"]["type"] == "string"

    def test_empty_field_list(self):
        registry = DefinitionRegistry()
        tree = build_definition_tree([], registry, "Empty", "Empty")
        assert tree.top_level_ref == "Empty"
        assert len(registry) == 0

    def test_first_row_is_ordinary_without_root_election(self):
        registry = DefinitionRegistry()
        fields = [_field("home", "Object"), _field("home.street", "String")]
        tree = build_definition_tree(fields, registry, "Group", "Group", elect_root=False)
        assert tree.top_level_ref == "Group"
        assert tree.top_level_ref_type == ""
        assert registry["Group"].properties["home"]["$ref"] == "#/definitions/home"
        assert registry["Group"].required == ["home"]
        assert set(registry["home"].properties) == {"street"}


class TestNesting:
    def test_one_definition_per_owner(self):
        registry = DefinitionRegistry()
        build_definition_tree(USER_FIELDS, registry, "Root", "Root")
        assert sorted(registry) == ["user", "user.address"]
        assert list(registry["user"].properties) == ["name", "age", "address"]
        assert list(registry["user.address"].properties) == ["city", "zip"]

    def test_object_leaf_references_its_own_path(self):
        registry = DefinitionRegistry()
        build_definition_tree(USER_FIELDS, registry, "Root", "Root")
        assert registry["user"].properties["address"] == {
            "type": "object",
            "description": "",
            "$ref": "#/definitions/user.address",
        }

    def test_object_array_leaf(self):
        registry = DefinitionRegistry()
        fields = [_field("order", "Object"), _field("order.lines", "Object[]"), _field("order.lines.sku", "String")]
        build_definition_tree(fields, registry, "Root", "Root")
        assert registry["order"].properties["lines"]["items"] == {"$ref": "#/definitions/order.lines"}
        assert registry["order.lines"].properties["sku"]["type"] == "string"

    def test_scalar_array_leaf(self):
        registry = DefinitionRegistry()
        build_definition_tree([_field("user", "Object"), _field("user.tags", "String[]")], registry, "R", "R")
        assert registry["user"].properties["tags"] == {"type": "array", "description": "", "items": {"type": "string"}}

    def test_reference_to_existing_definition(self):
        registry = DefinitionRegistry()
        registry.ensure("Address")
        fields = [_field("user", "Object"), _field("user.home", "Address"), _field("user.past", "Address[]")]
        build_definition_tree(fields, registry, "R", "R")
        assert registry["user"].properties["home"]["$ref"] == "#/definitions/Address"
        assert registry["user"].properties["past"]["items"] == {"$ref": "#/definitions/Address"}

    def test_forward_reference_stays_scalar(self):
        registry = DefinitionRegistry()
        build_definition_tree([_field("user", "Object"), _field("user.home", "Address")], registry, "R", "R")
        registry.ensure("Address")
        assert registry["user"].properties["home"] == {"type": "address", "description": ""}

    def test_disjoint_subtrees_are_not_linked(self):
        registry = DefinitionRegistry()
        fields = [_field("Body", "Object"), _field("Body.user.name"), _field("Body.meta.tag")]
        build_definition_tree(fields, registry, "Body", "Body")
        assert registry["Body"].properties == {}
        assert "name" in registry["Body.user"].properties
        assert "tag" in registry["Body.meta"].properties

    def test_descriptions_lose_tags(self):
        registry = DefinitionRegistry()
        build_definition_tree([_field("id", description="<p>Identifier</p>")], registry, "R", "R")
        assert registry["R"].properties["id"]["description"] == "Identifier"


class TestRequiredAndMerging:
    def test_required_follows_optional_flag(self):
        registry = DefinitionRegistry()
        build_definition_tree(USER_FIELDS, registry, "Root", "Root")
        assert registry["user"].required == ["name", "address"]
        assert registry["user.address"].required == ["city"]

    def test_repeated_rows_do_not_duplicate_required(self):
        registry = DefinitionRegistry()
        fields = [_field("user", "Object"), _field("user.name"), _field("user.name", "Number")]
        build_definition_tree(fields, registry, "R", "R")
        assert registry["user"].required == ["name"]
        assert registry["user"].properties["name"]["type"] == "string"

    def test_merges_into_existing_definition(self):
        registry = DefinitionRegistry()
        build_definition_tree([_field("user", "Object"), _field("user.name")], registry, "A", "A")
        build_definition_tree([_field("user", "Object"), _field("user.email"), _field("user.name", "Number")], registry, "B", "B")
        assert registry["user"].properties["name"]["type"] == "string"
        assert list(registry["user"].properties) == ["name", "email"]

    def test_idempotent_on_fresh_registry(self):
        first = DefinitionRegistry()
        second = DefinitionRegistry()
        build_definition_tree(USER_FIELDS, first, "Root", "Root")
        build_definition_tree(USER_FIELDS, second, "Root", "Root")
        assert json.dumps(first.to_dict()) == json.dumps(second.to_dict())
