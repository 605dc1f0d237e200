import pytest

from gqlshape.directives import Directive, include
from gqlshape.error import DescriptorError, ErrorKind
from gqlshape.literals import Variable
from gqlshape.operation import Operation, OperationType
from gqlshape.query import (
    Alias,
    Array,
    Directed,
    Fragment,
    InlineFragment,
    Node,
    Params,
    QueryVisitor,
    Scalar,
    Spread,
)
from gqlshape.types import Constant, Custom, Enum, Number, Optional, String


def test_equality():
    assert Node({"a": Scalar(String)}) == Node({"a": Scalar(String)})
    assert Node({"a": Scalar(String)}) != Node({"a": Scalar(Number)})
    assert (
        Params({"x": 1, "y": 2}, Scalar(String))
        != Params({"y": 2, "x": 1}, Scalar(String))
    )
    assert (
        Node({"a": Scalar(String), "b": Scalar(String)})
        != Node({"b": Scalar(String), "a": Scalar(String)})
    )


def test_repr():
    assert repr(Scalar(String)) == "Scalar(type=String)"
    assert repr(Node({"a": Scalar(String)})) == (
        "Node(fields={'a': Scalar(type=String)})"
    )


def test_immutable_fields():
    node = Node({"a": Scalar(String)})
    with pytest.raises(TypeError):
        node.fields["b"] = Scalar(String)
    with pytest.raises(TypeError):
        node.fields.pop("a")


def test_invalid_selection():
    with pytest.raises(TypeError):
        Node({"a": "String"})
    with pytest.raises(TypeError):
        Node({"a": Fragment("f", "T", Node({"b": Scalar(String)}))})
    with pytest.raises(TypeError):
        Array(Spread(Fragment("f", "T", Node({"b": Scalar(String)}))))
    with pytest.raises(TypeError):
        Params({"x": object()}, Scalar(String))
    with pytest.raises(TypeError):
        Scalar(str)
    with pytest.raises(TypeError):
        InlineFragment("User", Scalar(String))
    with pytest.raises(TypeError):
        Directed(["include"], Scalar(String))


def test_spread_keys_are_not_field_names():
    fragment = Fragment("f", "T", Node({"b": Scalar(String)}))
    node = Node({
        "...f": Spread(fragment),
        "... on User": InlineFragment("User", Node({"id": Scalar(Number)})),
    })
    assert list(node.fields) == ["...f", "... on User"]


def test_alias_names():
    with pytest.raises(DescriptorError) as err:
        Alias("me", "user-name", Scalar(String))
    assert err.value.kind is ErrorKind.INVALID_IDENTIFIER


def test_directive():
    assert include(Variable("x")) == Directive("include", {"if": Variable("x")})
    assert repr(Directive("skip", {"if": True})) == (
        "Directive('skip', {'if': True})"
    )
    with pytest.raises(DescriptorError):
        Directive("@include")


def test_visitor():
    class Fields(QueryVisitor):
        def __init__(self):
            self.names = []

        def visit_node(self, obj):
            for key, value in obj.fields.items():
                self.names.append(key)
                self.visit(value)

    fragment = Fragment("f", "T", Node({"c": Scalar(String)}))
    visitor = Fields()
    visitor.visit(Node({
        "a": Params({"x": 1}, Node({"b": Scalar(String)})),
        "d": Alias("d", "e", Array(Node({"f": Scalar(Number)}))),
        "...f": Spread(fragment),
    }))
    assert visitor.names == ["a", "b", "d", "f", "...f"]
    visitor.visit(fragment)
    assert visitor.names[-1] == "c"


def test_operation():
    operation = Operation(
        OperationType.QUERY,
        Node({"a": Params({"id": Variable("id")}, Scalar(String))}),
        name="getA",
        variables={"$id": "ID!"},
    )
    assert operation.type is OperationType.QUERY
    assert operation.name == "getA"
    assert operation.variables == {"id": "ID!"}
    assert list(operation.variable_types) == ["id"]


def test_operation_root():
    with pytest.raises(TypeError):
        Operation(OperationType.QUERY, Scalar(String))


@pytest.mark.parametrize("kind", [Optional, Enum, Constant, Custom])
def test_scalar_of_unparameterized_kind(kind):
    with pytest.raises(TypeError):
        Scalar(kind)
    with pytest.raises(TypeError):
        Optional[kind]
