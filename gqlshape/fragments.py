import typing as t

from collections import OrderedDict

from graphql.language import ast

from .query import Fragment

if t.TYPE_CHECKING:
    from .export.graphql import Exporter


class FragmentRegistry:
    """Collects fragment definitions of a single document

    Fragments are deduplicated by name and emitted in order of their first
    registration. A registry belongs to one render call and is never reused.
    """

    def __init__(self) -> None:
        self._fragments: "OrderedDict[str, Fragment]" = OrderedDict()
        self._selections: t.Dict[str, ast.SelectionSetNode] = {}

    def __contains__(self, name: str) -> bool:
        return name in self._fragments

    def __len__(self) -> int:
        return len(self._fragments)

    def register(self, fragment: Fragment) -> bool:
        """Registers fragment

        :return: ``True`` when this name is registered for the first time
        """
        seen = self._fragments.get(fragment.name)
        if seen is not None:
            assert seen is fragment or seen == fragment, (
                "Fragment {!r} has different definitions".format(fragment.name)
            )
            return False
        self._fragments[fragment.name] = fragment
        return True

    def is_defined(self, name: str) -> bool:
        return name in self._selections

    def define(self, name: str, selection_set: ast.SelectionSetNode) -> None:
        """Stores rendered selection set of the registered fragment"""
        assert name in self._fragments, name
        assert name not in self._selections, name
        self._selections[name] = selection_set

    def render_all(
        self, exporter: "Exporter"
    ) -> t.List[ast.FragmentDefinitionNode]:
        # rendering a body may register more fragments
        while True:
            pending = [
                fr for name, fr in self._fragments.items()
                if name not in self._selections
            ]
            if not pending:
                break
            for fragment in pending:
                if not self.is_defined(fragment.name):
                    self.define(fragment.name, exporter.visit(fragment))

        return [
            ast.FragmentDefinitionNode(
                name=ast.NameNode(value=fragment.name),
                type_condition=ast.NamedTypeNode(
                    name=ast.NameNode(value=fragment.type_name),
                ),
                directives=(),
                selection_set=self._selections[name],
            )
            for name, fragment in self._fragments.items()
        ]
