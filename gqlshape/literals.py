"""
gqlshape.literals
~~~~~~~~~~~~~~~~~

Argument values and their GraphQL literal syntax.

Plain Python values are encoded as literals of the matching type:
``"active"`` becomes ``"active"`` (quoted), ``42`` becomes ``42``,
``{"id": 1}`` becomes ``{id: 1}``. Bare enum tokens and variable references
are expressed explicitly:

.. code-block:: python

    {"status": EnumValue("ACTIVE"), "id": Variable("id")}

which is encoded as ``status: ACTIVE, id: $id``.
"""

import enum
import math
import typing as t

from graphql.language import ast

from .error import DescriptorError, ErrorKind
from .utils import check_name


class Variable:
    """Reference to the operation's variable: ``$name``"""

    __slots__ = ("name",)

    def __init__(self, name: str) -> None:
        self.name = check_name(name, "variable name")

    def __repr__(self) -> str:
        return "Variable({!r})".format(self.name)

    def __eq__(self, other: t.Any) -> bool:
        return self.__class__ is other.__class__ and self.name == other.name

    def __hash__(self) -> int:
        return hash((self.__class__, self.name))


class EnumValue:
    """Bare (unquoted) enum token"""

    __slots__ = ("name",)

    def __init__(self, name: str) -> None:
        self.name = check_name(name, "enum value")
        if name in ("true", "false", "null"):
            raise DescriptorError(
                ErrorKind.INVALID_IDENTIFIER,
                "Enum value can not be {!r}".format(name),
            )

    def __repr__(self) -> str:
        return "EnumValue({!r})".format(self.name)

    def __eq__(self, other: t.Any) -> bool:
        return self.__class__ is other.__class__ and self.name == other.name

    def __hash__(self) -> int:
        return hash((self.__class__, self.name))


def _name(value: str) -> ast.NameNode:
    return ast.NameNode(value=value)


def encode(value: t.Any) -> ast.ValueNode:
    if value is None:
        return ast.NullValueNode()
    elif isinstance(value, Variable):
        return ast.VariableNode(name=_name(value.name))
    elif isinstance(value, EnumValue):
        return ast.EnumValueNode(value=value.name)
    elif isinstance(value, enum.Enum):
        return ast.EnumValueNode(value=value.name)
    elif isinstance(value, bool):
        return ast.BooleanValueNode(value=value)
    elif isinstance(value, int):
        return ast.IntValueNode(value=str(value))
    elif isinstance(value, float):
        return ast.FloatValueNode(value=str(value))
    elif isinstance(value, str):
        return ast.StringValueNode(value=value, block=False)
    elif isinstance(value, (list, tuple)):
        return ast.ListValueNode(values=tuple(encode(v) for v in value))
    elif isinstance(value, dict):
        return ast.ObjectValueNode(
            fields=tuple(
                ast.ObjectFieldNode(name=_name(key), value=encode(val))
                for key, val in value.items()
            )
        )
    else:
        raise TypeError("Unsupported type: {!r}".format(value))


def check_value(value: t.Any) -> t.Iterator[str]:
    """Checks that the value can be encoded, yields variable names in use

    :raises TypeError: for values without literal representation
    :raises DescriptorError: for invalid object field names
    """
    if isinstance(value, Variable):
        yield value.name
    elif value is None or isinstance(
        value, (EnumValue, enum.Enum, bool, int, str)
    ):
        pass
    elif isinstance(value, float):
        if math.isnan(value) or math.isinf(value):
            raise TypeError("Unsupported float value: {!r}".format(value))
    elif isinstance(value, (list, tuple)):
        for item in value:
            yield from check_value(item)
    elif isinstance(value, dict):
        for key, item in value.items():
            check_name(key, "argument name")
            yield from check_value(item)
    else:
        raise TypeError("Unsupported type: {!r}".format(value))
