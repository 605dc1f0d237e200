"""
gqlshape.query
~~~~~~~~~~~~~~

Selection descriptors, describing the shape of the requested data.

Example:

.. code-block:: python

    Node({
        "user": Params({"id": Variable("id")}, Node({
            "id": Scalar(Number),
            "name": Scalar(String),
        })),
    })

This descriptor will be rendered as:

.. code-block:: graphql

    {
      user(id: $id) {
        id
        name
      }
    }

And the result is expected to look like this:

.. code-block:: python

    {
        "user": {
            "id": 1,
            "name": "Angela",
        },
    }

Keys of the :py:class:`Node` are field names. Fragment spreads and inline
fragments are not fields, their keys are only required to be unique within
the node (:py:mod:`gqlshape.builder` uses ``...name`` and ``... on Type``).
"""

import typing as t

from .directives import Directive
from .error import DescriptorError, ErrorKind
from .literals import check_value
from .types import CustomMeta, EnumMeta, GenericMeta, TypeVisitor, is_kind
from .utils import ImmutableDict, check_fragment_name, check_name


def _same(a: t.Any, b: t.Any) -> bool:
    if isinstance(a, dict) and isinstance(b, dict):
        return len(a) == len(b) and all(
            ka == kb and _same(va, vb)
            for (ka, va), (kb, vb) in zip(a.items(), b.items())
        )
    return bool(a == b)


class Base:
    __attrs__: t.Tuple[str, ...] = ()

    def __repr__(self) -> str:
        kwargs = ", ".join(
            "{}={!r}".format(attr, self.__dict__[attr])
            for attr in self.__attrs__
        )
        return "{}({})".format(self.__class__.__name__, kwargs)

    def __eq__(self, other: t.Any) -> bool:
        return self.__class__ is other.__class__ and all(
            _same(self.__dict__[attr], other.__dict__[attr])
            for attr in self.__attrs__
        )

    def __ne__(self, other: t.Any) -> bool:
        return not self.__eq__(other)

    __hash__ = None  # type: ignore

    def accept(self, visitor: "QueryVisitor") -> t.Any:
        raise NotImplementedError(type(self))


class _CheckKind(TypeVisitor):
    def visit_enum(self, obj: EnumMeta) -> None:
        check_name(obj.__type_name__, "enum name")
        for value in obj.__values__:
            check_name(value, "enum value")

    def visit_custom(self, obj: CustomMeta) -> None:
        check_name(obj.__type_name__, "type name")


class Scalar(Base):
    """Represents a leaf field

    :param type_: scalar kind from :py:mod:`gqlshape.types`
    """

    __attrs__ = ("type",)

    def __init__(self, type_: GenericMeta) -> None:
        if not is_kind(type_):
            raise TypeError("Invalid scalar kind: {!r}".format(type_))
        _CheckKind().visit(type_)
        self.type = type_

    def accept(self, visitor: "QueryVisitor") -> t.Any:
        return visitor.visit_scalar(self)


class Node(Base):
    """Represents a selection set -- ordered collection of fields,
    fragment spreads and inline fragments

    :param fields: mapping of keys to selections, order is preserved
    """

    __attrs__ = ("fields",)

    def __init__(self, fields: t.Mapping[str, "Selection"]) -> None:
        if not fields:
            raise DescriptorError(
                ErrorKind.EMPTY_SELECTION,
                "Selection set should contain at least one field",
            )
        for key, value in fields.items():
            if isinstance(value, (Spread, InlineFragment)):
                continue
            _check_field(value)
            if not isinstance(value, Alias):
                check_name(key, "field name")
        self.fields: ImmutableDict[str, Selection] = ImmutableDict(fields)

    def accept(self, visitor: "QueryVisitor") -> t.Any:
        return visitor.visit_node(self)


class Array(Base):
    """Represents a list of values, rendered exactly as its element

    :param node: selection of the list element
    """

    __attrs__ = ("node",)

    def __init__(self, node: "FieldSelection") -> None:
        _check_field(node)
        self.node = node

    def accept(self, visitor: "QueryVisitor") -> t.Any:
        return visitor.visit_array(self)


class Params(Base):
    """Adds arguments to the field

    :param args: mapping of argument names to values, order is preserved
    :param node: selection of the field
    """

    __attrs__ = ("args", "node")

    def __init__(
        self, args: t.Mapping[str, t.Any], node: "FieldSelection"
    ) -> None:
        for name, value in args.items():
            check_name(name, "argument name")
            for _ in check_value(value):
                pass
        _check_field(node)
        self.args: ImmutableDict[str, t.Any] = ImmutableDict(args)
        self.node = node

    def accept(self, visitor: "QueryVisitor") -> t.Any:
        return visitor.visit_params(self)


class Alias(Base):
    """Requests field ``name`` under the ``alias`` key in the result

    :param alias: field's name in the result
    :param name: field's name in the schema
    :param node: selection of the field
    """

    __attrs__ = ("alias", "name", "node")

    def __init__(self, alias: str, name: str, node: "FieldSelection") -> None:
        self.alias = check_name(alias, "alias")
        self.name = check_name(name, "field name")
        _check_field(node)
        self.node = node

    def accept(self, visitor: "QueryVisitor") -> t.Any:
        return visitor.visit_alias(self)


class Directed(Base):
    """Applies directives to the field

    :param directives: sequence of :py:class:`~gqlshape.directives.Directive`
    :param node: selection of the field
    """

    __attrs__ = ("directives", "node")

    def __init__(
        self, directives: t.Sequence[Directive], node: "FieldSelection"
    ) -> None:
        for directive in directives:
            if not isinstance(directive, Directive):
                raise TypeError("Invalid directive: {!r}".format(directive))
        _check_field(node)
        self.directives = tuple(directives)
        self.node = node

    def accept(self, visitor: "QueryVisitor") -> t.Any:
        return visitor.visit_directed(self)


class Fragment(Base):
    """Named selection set, which can be spread in other selection sets

    Fragments are identified by name: equal fragments with the same name
    are the same definition, it is rendered once per document.

    :param name: fragment name
    :param type_name: type condition
    :param node: selection set of the fragment
    """

    __attrs__ = ("name", "type_name", "node")

    def __init__(self, name: str, type_name: str, node: Node) -> None:
        if not isinstance(node, Node):
            raise TypeError("Fragment body should be a Node: {!r}".format(node))
        self.name = check_fragment_name(name)
        self.type_name = check_name(type_name, "type name")
        self.node = node

    def accept(self, visitor: "QueryVisitor") -> t.Any:
        return visitor.visit_fragment(self)


class Spread(Base):
    """Fragment spread: ``...name``

    :param fragment: :py:class:`Fragment` to spread, shared by reference
    """

    __attrs__ = ("fragment",)

    def __init__(self, fragment: Fragment) -> None:
        if not isinstance(fragment, Fragment):
            raise TypeError("Invalid fragment: {!r}".format(fragment))
        self.fragment = fragment

    def accept(self, visitor: "QueryVisitor") -> t.Any:
        return visitor.visit_spread(self)


class InlineFragment(Base):
    """Type-conditioned selection: ``... on Type { ... }``

    :param type_name: type condition
    :param node: selection set applied when the object is of this type
    """

    __attrs__ = ("type_name", "node")

    def __init__(self, type_name: str, node: Node) -> None:
        if not isinstance(node, Node):
            raise TypeError(
                "Inline fragment body should be a Node: {!r}".format(node)
            )
        self.type_name = check_name(type_name, "type name")
        self.node = node

    def accept(self, visitor: "QueryVisitor") -> t.Any:
        return visitor.visit_inline_fragment(self)


FieldSelection = t.Union[Scalar, Node, Array, Params, Alias, Directed]
Selection = t.Union[FieldSelection, Spread, InlineFragment]

_FIELD_SELECTIONS = (Scalar, Node, Array, Params, Alias, Directed)


def _check_field(value: t.Any) -> None:
    if not isinstance(value, _FIELD_SELECTIONS):
        raise TypeError("Invalid field selection: {!r}".format(value))


class QueryVisitor:
    def visit(self, obj: t.Any) -> t.Any:
        return obj.accept(self)

    def visit_scalar(self, obj: Scalar) -> t.Any:
        pass

    def visit_node(self, obj: Node) -> t.Any:
        for item in obj.fields.values():
            self.visit(item)

    def visit_array(self, obj: Array) -> t.Any:
        return self.visit(obj.node)

    def visit_params(self, obj: Params) -> t.Any:
        return self.visit(obj.node)

    def visit_alias(self, obj: Alias) -> t.Any:
        return self.visit(obj.node)

    def visit_directed(self, obj: Directed) -> t.Any:
        return self.visit(obj.node)

    def visit_spread(self, obj: Spread) -> t.Any:
        pass

    def visit_inline_fragment(self, obj: InlineFragment) -> t.Any:
        return self.visit(obj.node)

    def visit_fragment(self, obj: Fragment) -> t.Any:
        return self.visit(obj.node)
