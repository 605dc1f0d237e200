import typing as t

from ..error import ErrorKind
from ..literals import check_value
from ..query import (
    Directed,
    Fragment,
    Node,
    Params,
    QueryVisitor,
    Spread,
)
from .errors import Errors


class QueryValidator(QueryVisitor):
    """Checks invariants which can be verified only for the whole
    operation: fragment names, fragment cycles and variable declarations
    """

    def __init__(self, variables: t.Mapping[str, t.Any], errors: Errors):
        self.variables = variables
        self.errors = errors
        self.fragments: t.Dict[str, Fragment] = {}
        self.used: t.List[str] = []
        self._path: t.List[str] = []
        self._visited: t.Set[str] = set()
        self._undeclared: t.Set[str] = set()

    def _use(self, value: t.Any) -> None:
        for name in check_value(value):
            if name in self.variables:
                if name not in self.used:
                    self.used.append(name)
            elif name not in self._undeclared:
                self._undeclared.add(name)
                self.errors.report(
                    ErrorKind.UNDECLARED_VARIABLE,
                    "Variable ${} is used but not declared".format(name),
                )

    def visit_params(self, obj: Params) -> None:
        for value in obj.args.values():
            self._use(value)
        self.visit(obj.node)

    def visit_directed(self, obj: Directed) -> None:
        for directive in obj.directives:
            for value in directive.args.values():
                self._use(value)
        self.visit(obj.node)

    def visit_spread(self, obj: Spread) -> None:
        fragment = obj.fragment
        name = fragment.name
        seen = self.fragments.get(name)
        if seen is None:
            self.fragments[name] = fragment
        elif seen is not fragment and seen != fragment:
            self.errors.report(
                ErrorKind.DUPLICATE_FRAGMENT_NAME,
                'Fragment "{}" has different definitions'.format(name),
            )
            return

        if name in self._path:
            cycle = self._path[self._path.index(name):] + [name]
            self.errors.report(
                ErrorKind.FRAGMENT_CYCLE,
                "Fragment cycle: {}".format(" -> ".join(cycle)),
            )
            return

        if name in self._visited:
            return

        self._path.append(name)
        self.visit(fragment)
        self._path.pop()
        self._visited.add(name)


def validate(
    query: Node, variables: t.Mapping[str, t.Any]
) -> t.Tuple[Errors, t.List[str]]:
    """Validates root selection set of the operation

    :param query: root :py:class:`~gqlshape.query.Node`
    :param variables: declared variables
    :return: reported errors and names of the used variables
    """
    errors = Errors()
    validator = QueryValidator(variables, errors)
    validator.visit(query)
    return errors, validator.used
