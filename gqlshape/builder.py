"""
gqlshape.builder
~~~~~~~~~~~~~~~~

Declarative way to describe operations with plain dicts and lists:

.. code-block:: python

    from gqlshape.builder import query, params, alias, types, var

    get_user = query("getUser", params({"$id": "Int!"}, {
        "user": params({"id": var("id")}, {
            "id": types.number,
            "name": types.string,
            "friends": [{
                "id": types.number,
            }],
        }),
        alias("me", "user"): {
            "id": types.number,
        },
    }))

    print(get_user)

* scalar kinds from :py:data:`types` are leaf fields;
* dicts are selection sets, one-element lists are lists of objects;
* :py:func:`params` adds arguments to the field, or, when all keys start
  with ``$``, declares variables of the operation;
* :py:func:`spread`, :py:func:`on` and :py:func:`on_union` return dicts,
  which should be merged into a selection set using ``**``.
"""

import enum
import typing as t

from collections.abc import Mapping

from . import types as _types
from .directives import Directive, include as _include, skip as _skip
from .literals import EnumValue, Variable
from .operation import Operation, OperationType
from .query import (
    Alias,
    Array,
    Base,
    Directed,
    Fragment,
    InlineFragment,
    Node,
    Params,
    Scalar,
    Spread,
)


class AliasKey(t.NamedTuple):
    """Selection set key, requesting ``name`` field as ``alias``"""

    alias: str
    name: str


class Declarations:
    """Root selection set with declared operation variables"""

    def __init__(self, variables: t.Mapping[str, str], fields: t.Any):
        self.variables = dict(variables)
        self.node = node(fields)

    def __repr__(self) -> str:
        return "Declarations({!r}, {!r})".format(self.variables, self.node)


def selection(value: t.Any) -> t.Any:
    """Converts described value into selection"""
    if isinstance(value, Base):
        return value
    elif isinstance(value, _types.GenericMeta):
        return Scalar(value)
    elif isinstance(value, Mapping):
        return node(value)
    elif isinstance(value, (list, tuple)):
        if len(value) != 1:
            raise TypeError(
                "List selection should contain exactly one item: {!r}"
                .format(value)
            )
        return Array(selection(value[0]))
    else:
        raise TypeError("Invalid selection: {!r}".format(value))


def node(fields: t.Any) -> Node:
    if isinstance(fields, Node):
        return fields
    if not isinstance(fields, Mapping):
        raise TypeError("Selection set should be a dict: {!r}".format(fields))
    items = {}
    for key, value in fields.items():
        if isinstance(key, AliasKey):
            items[key.alias] = Alias(key.alias, key.name, selection(value))
        else:
            items[key] = selection(value)
    return Node(items)


def alias(alias: str, name: str) -> AliasKey:
    """Returns key, requesting ``name`` field as ``alias``

    .. code-block:: python

        {alias("maleUser", "user"): {"id": types.number}}

    """
    return AliasKey(alias, name)


def params(
    args: t.Mapping[str, t.Any], fields: t.Any
) -> t.Union[Params, Declarations]:
    """Adds arguments to the field

    When every key starts with ``$``, mapping declares variables of the
    operation instead, values are GraphQL type references:

    .. code-block:: python

        query("getUser", params({"$id": "Int!"}, {
            "user": params({"id": var("id")}, {"name": types.string}),
        }))

    """
    keys = [k for k in args if isinstance(k, str) and k.startswith("$")]
    if args and len(keys) == len(args):
        return Declarations(args, fields)
    elif keys:
        raise TypeError(
            "Variable declarations can not be mixed with arguments: {!r}"
            .format(keys)
        )
    return Params(args, selection(fields))


def fragment(name: str, type_name: str, fields: t.Any) -> Fragment:
    return Fragment(name, type_name, node(fields))


def spread(fragment: Fragment) -> t.Dict[str, Spread]:
    """Fragment spread, to be merged into a selection set:
    ``{**spread(user_fragment), "email": types.string}``
    """
    return {"..." + fragment.name: Spread(fragment)}


def on(type_name: str, fields: t.Any) -> t.Dict[str, InlineFragment]:
    """Inline fragment, to be merged into a selection set:
    ``{"id": types.number, **on("User", {"name": types.string})}``
    """
    return {"... on " + type_name: InlineFragment(type_name, node(fields))}


def on_union(
    types: t.Mapping[str, t.Any]
) -> t.Dict[str, InlineFragment]:
    """Inline fragments for every member of the union, in the given order"""
    items: t.Dict[str, InlineFragment] = {}
    for type_name, fields in types.items():
        items.update(on(type_name, fields))
    return items


def var(name: str) -> Variable:
    return Variable(name)


def enum_value(name: t.Union[str, enum.Enum]) -> EnumValue:
    if isinstance(name, enum.Enum):
        name = name.name
    return EnumValue(name)


def directive(items: t.Sequence[Directive], fields: t.Any) -> Directed:
    return Directed(items, selection(fields))


def include(condition: t.Any, fields: t.Any) -> Directed:
    return directive([_include(condition)], fields)


def skip(condition: t.Any, fields: t.Any) -> Directed:
    return directive([_skip(condition)], fields)


def _operation(
    type_: OperationType, name: t.Any, root: t.Any
) -> Operation:
    if root is None:
        name, root = None, name
    variables = None
    if isinstance(root, Declarations):
        variables = root.variables
        root = root.node
    return Operation(type_, node(root), name=name, variables=variables)


def query(name: t.Any, root: t.Any = None) -> Operation:
    """Builds query operation

    :param name: operation name, can be omitted: ``query({...})``
    :param root: root selection set, optionally wrapped into
        :py:func:`params` with variable declarations
    """
    return _operation(OperationType.QUERY, name, root)


def mutation(name: t.Any, root: t.Any = None) -> Operation:
    return _operation(OperationType.MUTATION, name, root)


def subscription(name: t.Any, root: t.Any = None) -> Operation:
    return _operation(OperationType.SUBSCRIPTION, name, root)


class _Types:
    def __init__(self, optional: bool = False) -> None:
        self._optional = optional

    def _wrap(self, kind: _types.GenericMeta) -> _types.GenericMeta:
        return _types.Optional[kind] if self._optional else kind

    def __call__(self, kind: _types.GenericMeta) -> _types.GenericMeta:
        assert self._optional, "Only types.optional is callable"
        return _types.Optional[kind]

    def __repr__(self) -> str:
        return "types.optional" if self._optional else "types"

    @property
    def number(self) -> _types.GenericMeta:
        return self._wrap(_types.Number)

    @property
    def string(self) -> _types.GenericMeta:
        return self._wrap(_types.String)

    @property
    def boolean(self) -> _types.GenericMeta:
        return self._wrap(_types.Boolean)

    @property
    def optional(self) -> "_Types":
        return _Types(optional=True)

    def one_of(
        self,
        name: t.Union[str, t.Type[enum.Enum]],
        values: t.Optional[t.Iterable[str]] = None,
    ) -> _types.GenericMeta:
        if values is None:
            if not (isinstance(name, type) and issubclass(name, enum.Enum)):
                raise TypeError("Enum values are required for {!r}"
                                .format(name))
            return self._wrap(_types.Enum[name])
        return self._wrap(_types.Enum[name, list(values)])

    def constant(self, value: t.Any) -> _types.GenericMeta:
        return self._wrap(_types.Constant[value])

    def custom(self, type_name: str) -> _types.GenericMeta:
        return self._wrap(_types.Custom[type_name])


#: scalar kinds of the leaf fields: ``types.string``,
#: ``types.optional.number``, ``types.one_of(Status)``
types = _Types()
