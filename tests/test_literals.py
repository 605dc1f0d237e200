import enum

import pytest

from gqlshape.error import DescriptorError, ErrorKind
from gqlshape.export.graphql import print_node
from gqlshape.literals import (
    EnumValue,
    Variable,
    check_value,
    encode,
)


class Color(enum.Enum):
    RED = "red"
    GREEN = "green"


def check_encode(value, data):
    assert print_node(encode(value)) == data


@pytest.mark.parametrize("value, data", [
    ("active", '"active"'),
    ('say "hi"\n', '"say \\"hi\\"\\n"'),
    (42, "42"),
    (-7, "-7"),
    (1.5, "1.5"),
    (True, "true"),
    (False, "false"),
    (None, "null"),
    (Variable("id"), "$id"),
    (EnumValue("ADMIN"), "ADMIN"),
    (Color.RED, "RED"),
    ([1, "a", None], '[1, "a", null]'),
    ((Color.RED, Color.GREEN), "[RED, GREEN]"),
    ({"a": {"b": 1}}, "{a: {b: 1}}"),
    ({"where": {"id": Variable("id")}, "limit": 10},
     "{where: {id: $id}, limit: 10}"),
])
def test_encode(value, data):
    check_encode(value, data)


def test_encode_unsupported():
    with pytest.raises(TypeError):
        encode(object())


def test_check_value():
    with pytest.raises(TypeError):
        list(check_value({"a": {1, 2}}))
    with pytest.raises(TypeError):
        list(check_value(float("nan")))
    with pytest.raises(TypeError):
        list(check_value([float("inf")]))
    with pytest.raises(DescriptorError) as err:
        list(check_value({"not valid": 1}))
    assert err.value.kind is ErrorKind.INVALID_IDENTIFIER


def test_enum_value():
    assert EnumValue("ADMIN") == EnumValue("ADMIN")
    assert EnumValue("ADMIN") != Variable("ADMIN")
    with pytest.raises(DescriptorError) as err:
        EnumValue("true")
    assert err.value.kind is ErrorKind.INVALID_IDENTIFIER


def test_variable():
    assert Variable("id") == Variable("id")
    assert repr(Variable("id")) == "Variable('id')"
    assert hash(Variable("id")) == hash(Variable("id"))
