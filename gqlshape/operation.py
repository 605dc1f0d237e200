import enum
import logging

from typing import Mapping, Optional

from graphql.error import GraphQLSyntaxError
from graphql.language import ast
from graphql.language.parser import parse_type

from .error import DescriptorError, ErrorKind
from .query import Node
from .utils import ImmutableDict, check_name
from .validate.query import validate


log = logging.getLogger(__name__)


class OperationType(enum.Enum):
    """Enumerates GraphQL operation types"""

    #: query operation
    QUERY = ast.OperationType.QUERY
    #: mutation operation
    MUTATION = ast.OperationType.MUTATION
    #: subscription operation
    SUBSCRIPTION = ast.OperationType.SUBSCRIPTION


def _strip_variable(name: str) -> str:
    if isinstance(name, str) and name.startswith("$"):
        name = name[1:]
    return check_name(name, "variable name")


def _parse_type(name: str, type_ref: str) -> ast.TypeNode:
    message = "Invalid type of the variable ${}: {!r}".format(name, type_ref)
    if not isinstance(type_ref, str):
        raise DescriptorError(ErrorKind.INVALID_IDENTIFIER, message)
    try:
        return parse_type(type_ref, no_location=True)
    except GraphQLSyntaxError as e:
        raise DescriptorError(ErrorKind.INVALID_IDENTIFIER, message) from e


class Operation:
    """Represents GraphQL operation, validated as a whole

    :param type_: :py:class:`OperationType`
    :param query: root selection set -- :py:class:`~gqlshape.query.Node`
    :param optional name: operation name
    :param optional variables: mapping of variable names (with or without
        leading ``$``) to GraphQL type references, e.g. ``"[ID!]!"``
    :raises DescriptorError: when descriptor is invalid
    """

    __slots__ = ("type", "query", "name", "variables", "variable_types")

    def __init__(
        self,
        type_: OperationType,
        query: Node,
        name: Optional[str] = None,
        variables: Optional[Mapping[str, str]] = None,
    ):
        if not isinstance(query, Node):
            raise TypeError("Invalid root selection: {!r}".format(query))
        #: type of the operation
        self.type = OperationType(type_)
        #: operation's root selection set
        self.query = query
        #: optional name of the operation
        self.name = check_name(name, "operation name") if name else None

        declared = {}
        for key, type_ref in (variables or {}).items():
            var_name = _strip_variable(key)
            declared[var_name] = type_ref
        #: variable declarations -- mapping of names to type references
        self.variables: ImmutableDict[str, str] = ImmutableDict(declared)
        self.variable_types: ImmutableDict[str, ast.TypeNode] = ImmutableDict(
            (key, _parse_type(key, val)) for key, val in declared.items()
        )

        errors, used = validate(query, self.variables)
        if errors.list:
            kind, message = errors.list[0]
            raise DescriptorError(kind, message, errors=list(errors.list))

        for var_name in self.variables:
            if var_name not in used:
                log.warning(
                    "Variable $%s is declared but never used in %s %s",
                    var_name,
                    self.type.value.value,
                    self.name or "<anonymous>",
                )

    def __repr__(self) -> str:
        return "Operation({}, {!r}, name={!r}, variables={!r})".format(
            self.type, self.query, self.name, dict(self.variables)
        )

    def __str__(self) -> str:
        from .export.graphql import render

        return render(self)
