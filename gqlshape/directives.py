import typing as t

from .literals import check_value
from .utils import ImmutableDict, check_name


class Directive:
    """Directive applied to the field, e.g. ``@include(if: $withFriends)``

    :param name: directive name, without ``@``
    :param optional args: directive arguments -- mapping of names to values
    """

    __slots__ = ("name", "args")

    def __init__(
        self, name: str, args: t.Optional[t.Mapping[str, t.Any]] = None
    ) -> None:
        self.name = check_name(name, "directive name")
        args = args or {}
        for arg_name, value in args.items():
            check_name(arg_name, "argument name")
            for _ in check_value(value):
                pass
        self.args: ImmutableDict[str, t.Any] = ImmutableDict(args)

    def __repr__(self) -> str:
        return "Directive({!r}, {!r})".format(self.name, dict(self.args))

    def __eq__(self, other: t.Any) -> bool:
        return (
            self.__class__ is other.__class__
            and self.name == other.name
            and list(self.args.items()) == list(other.args.items())
        )

    def __ne__(self, other: t.Any) -> bool:
        return not self.__eq__(other)


def include(condition: t.Any) -> Directive:
    return Directive("include", {"if": condition})


def skip(condition: t.Any) -> Directive:
    return Directive("skip", {"if": condition})
