import enum

import pytest

from gqlshape.types import (
    Boolean,
    Constant,
    Custom,
    Enum,
    Number,
    Optional,
    String,
    TypeVisitor,
)


class Status(enum.Enum):
    ACTIVE = 1
    BANNED = 2


def test_equality():
    assert Optional[String] == Optional[String]
    assert Optional[String] != Optional[Number]
    assert Enum["Status", ["ACTIVE"]] == Enum["Status", ["ACTIVE"]]
    assert Enum["Status", ["ACTIVE"]] != Enum["Status", ["BANNED"]]
    assert Constant["User"] != Constant["Bot"]
    assert Custom["Date"] == Custom["Date"]


def test_repr():
    assert repr(String) == "String"
    assert repr(Optional[Boolean]) == "Optional[Boolean]"
    assert repr(Enum["Status", ("A", "B")]) == "Enum['Status', ['A', 'B']]"
    assert repr(Constant["User"]) == "Constant['User']"
    assert repr(Custom["Date"]) == "Custom['Date']"


def test_python_enum():
    kind = Enum[Status]
    assert kind.__type_name__ == "Status"
    assert kind.__values__ == ("ACTIVE", "BANNED")


def test_final():
    with pytest.raises(TypeError):
        Optional[String][Number]


def test_optional_of_invalid_kind():
    with pytest.raises(TypeError):
        Optional["String"]


def test_visitor():
    class Names(TypeVisitor):
        def __init__(self):
            self.names = []

        def visit_string(self, obj):
            self.names.append("string")

        def visit_enum(self, obj):
            self.names.append(obj.__type_name__)

        def visit_optional(self, obj):
            self.names.append("optional")
            super().visit_optional(obj)

    visitor = Names()
    visitor.visit(Optional[String])
    visitor.visit(Optional[Optional[Enum[Status]]])
    assert visitor.names == [
        "optional", "string", "optional", "optional", "Status",
    ]


def test_inequality():
    assert Optional[String] != Optional[Number]
    assert not (Optional[String] != Optional[String])
    assert Enum[Status] != Enum["Status", ["ACTIVE"]]
    assert String != Number
