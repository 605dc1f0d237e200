import logging

from typing import (
    Any,
    Dict,
    List,
    Optional,
    Tuple,
    TypedDict,
)

from graphql.language import ast
from graphql.language.printer import PrintAstVisitor
from graphql.language.visitor import visit

from ..directives import Directive
from ..error import DescriptorError, ErrorKind
from ..fragments import FragmentRegistry
from ..literals import encode
from ..operation import Operation
from ..query import (
    Alias,
    Array,
    Directed,
    InlineFragment,
    Node,
    Params,
    QueryVisitor,
    Scalar,
    Spread,
)


log = logging.getLogger(__name__)


class GraphQLRequest(TypedDict, total=False):
    query: str
    variables: Optional[Dict[str, Any]]
    operationName: Optional[str]


def _name(value: Any) -> Optional[ast.NameNode]:
    return ast.NameNode(value=value) if value is not None else None


def _arguments(args: Dict[str, Any]) -> Tuple[ast.ArgumentNode, ...]:
    return tuple(
        ast.ArgumentNode(name=_name(key), value=encode(val))
        for key, val in args.items()
    )


def _directive(obj: Directive) -> ast.DirectiveNode:
    return ast.DirectiveNode(
        name=_name(obj.name),
        arguments=_arguments(obj.args),
    )


class _FieldExporter(QueryVisitor):
    """Collects field's head (alias, name, arguments, directives) while
    unwrapping decorations, down to the scalar or selection set
    """

    def __init__(self, exporter: "Exporter", name: str) -> None:
        self.exporter = exporter
        self.name = name
        self.alias: Optional[str] = None
        self.arguments: List[ast.ArgumentNode] = []
        self.directives: List[ast.DirectiveNode] = []

    def _field(
        self, selection_set: Optional[ast.SelectionSetNode] = None
    ) -> ast.FieldNode:
        return ast.FieldNode(
            alias=_name(self.alias),
            name=_name(self.name),
            arguments=tuple(self.arguments),
            directives=tuple(self.directives),
            selection_set=selection_set,
        )

    def visit_scalar(self, obj: Scalar) -> ast.FieldNode:
        return self._field()

    def visit_node(self, obj: Node) -> ast.FieldNode:
        return self._field(self.exporter.visit(obj))

    def visit_array(self, obj: Array) -> ast.FieldNode:
        return self.visit(obj.node)

    def visit_params(self, obj: Params) -> ast.FieldNode:
        self.arguments.extend(_arguments(obj.args))
        return self.visit(obj.node)

    def visit_alias(self, obj: Alias) -> ast.FieldNode:
        self.alias = obj.alias
        self.name = obj.name
        return self.visit(obj.node)

    def visit_directed(self, obj: Directed) -> ast.FieldNode:
        self.directives.extend(_directive(d) for d in obj.directives)
        return self.visit(obj.node)

    def visit_spread(self, obj: Spread) -> ast.FragmentSpreadNode:
        return self.exporter.visit(obj)

    def visit_inline_fragment(
        self, obj: InlineFragment
    ) -> ast.InlineFragmentNode:
        return self.exporter.visit(obj)


class Exporter(QueryVisitor):
    def __init__(self, registry: Optional[FragmentRegistry] = None) -> None:
        if registry is None:
            registry = FragmentRegistry()
        self.registry = registry

    def visit_node(self, obj: Node) -> ast.SelectionSetNode:
        return ast.SelectionSetNode(
            selections=tuple(
                _FieldExporter(self, key).visit(value)
                for key, value in obj.fields.items()
            )
        )

    def visit_spread(self, obj: Spread) -> ast.FragmentSpreadNode:
        fragment = obj.fragment
        if self.registry.register(fragment):
            self.registry.define(fragment.name, self.visit(fragment))
        return ast.FragmentSpreadNode(name=_name(fragment.name), directives=())

    def visit_inline_fragment(
        self, obj: InlineFragment
    ) -> ast.InlineFragmentNode:
        return ast.InlineFragmentNode(
            type_condition=ast.NamedTypeNode(name=_name(obj.type_name)),
            directives=(),
            selection_set=self.visit(obj.node),
        )


def export(operation: Operation) -> ast.DocumentNode:
    """Exports operation as GraphQL document AST

    :param operation: :py:class:`~gqlshape.operation.Operation`
    :return: :py:class:`graphql.language.ast.DocumentNode`
    """
    exporter = Exporter()
    variable_definitions = tuple(
        ast.VariableDefinitionNode(
            variable=ast.VariableNode(name=_name(name)),
            type=type_,
            default_value=None,
            directives=(),
        )
        for name, type_ in operation.variable_types.items()
    )
    definition = ast.OperationDefinitionNode(
        operation=operation.type.value,
        name=_name(operation.name),
        variable_definitions=variable_definitions,
        directives=(),
        selection_set=exporter.visit(operation.query),
    )
    fragments = exporter.registry.render_all(exporter)
    return ast.DocumentNode(definitions=(definition,) + tuple(fragments))


def _join(strings: Optional[Tuple[str, ...]], separator: str = "") -> str:
    return separator.join(s for s in strings or () if s)


class Printer(PrintAstVisitor):
    """Prints document AST keeping every field head on a single line

    Arguments, list and object values are never wrapped, and operations
    are never printed in the anonymous ``{ ... }`` shorthand.
    """

    @staticmethod
    def leave_operation_definition(node: Any, *_args: Any) -> str:
        head = node.operation.value
        if node.name:
            head += " " + node.name
        if node.variable_definitions:
            head += "(" + _join(node.variable_definitions, ", ") + ")"
        if node.directives:
            head += " " + _join(node.directives, " ")
        return head + " " + node.selection_set

    @staticmethod
    def leave_field(node: Any, *_args: Any) -> str:
        head = node.name
        if node.alias:
            head = node.alias + ": " + head
        if node.arguments:
            head += "(" + _join(node.arguments, ", ") + ")"
        return _join(
            (head, _join(node.directives, " "), node.selection_set), " "
        )

    @staticmethod
    def leave_fragment_definition(node: Any, *_args: Any) -> str:
        return _join((
            "fragment", node.name, "on", node.type_condition,
            _join(node.directives, " "), node.selection_set,
        ), " ")

    @staticmethod
    def leave_list_value(node: Any, *_args: Any) -> str:
        return "[" + _join(node.values, ", ") + "]"

    @staticmethod
    def leave_object_value(node: Any, *_args: Any) -> str:
        return "{" + _join(node.fields, ", ") + "}"


def print_node(node: ast.Node) -> str:
    """Prints document or any part of it as GraphQL text"""
    return visit(node, Printer())


def render(operation: Operation) -> str:
    """Renders operation into GraphQL document text

    :param operation: :py:class:`~gqlshape.operation.Operation`
    :return: operation definition followed by fragment definitions
    """
    document = export(operation)
    log.debug(
        "Rendered %s %s with %d fragment(s)",
        operation.type.value.value,
        operation.name or "<anonymous>",
        len(document.definitions) - 1,
    )
    return print_node(document)


def request(
    operation: Operation, variables: Optional[Dict[str, Any]] = None
) -> GraphQLRequest:
    """Builds JSON-ready request body for the GraphQL endpoint

    :param operation: :py:class:`~gqlshape.operation.Operation`
    :param optional variables: values of the declared variables
    :raises DescriptorError: when passed variable is not declared
    """
    variables = variables or {}
    for name in variables:
        if name not in operation.variables:
            raise DescriptorError(
                ErrorKind.UNDECLARED_VARIABLE,
                "Variable ${} is not declared in {} {}".format(
                    name,
                    operation.type.value.value,
                    operation.name or "<anonymous>",
                ),
            )
    data: GraphQLRequest = {"query": render(operation)}
    if variables:
        data["variables"] = variables
    if operation.name is not None:
        data["operationName"] = operation.name
    return data
