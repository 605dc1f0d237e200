"""
gqlshape.types
~~~~~~~~~~~~~~

Scalar kinds of the leaf fields. Kinds only describe what the caller expects
to receive in the response, they never change the rendered document:

.. code-block:: python

    Scalar(String)
    Scalar(Optional[Number])
    Scalar(Enum["Status", ["ACTIVE", "BANNED"]])
    Scalar(Constant["User"])
    Scalar(Custom["DateTime"])

"""

import enum
import typing as t

from abc import abstractmethod, ABC


class GenericMeta(type):
    def __repr__(cls) -> str:
        return cls.__name__

    def __eq__(cls, other: t.Any) -> bool:
        return (
            cls.__class__ is other.__class__ and cls.__dict__ == other.__dict__
        )

    def __ne__(cls, other: t.Any) -> bool:
        return not (cls == other)

    def __hash__(self) -> int:
        return hash(self.__name__)

    def accept(cls, visitor: "AbstractTypeVisitor") -> t.Any:
        raise NotImplementedError(type(cls))


class NumberMeta(GenericMeta):
    def accept(cls, visitor: "AbstractTypeVisitor") -> t.Any:
        return visitor.visit_number(cls)


class Number(metaclass=NumberMeta):
    pass


class StringMeta(GenericMeta):
    def accept(cls, visitor: "AbstractTypeVisitor") -> t.Any:
        return visitor.visit_string(cls)


class String(metaclass=StringMeta):
    pass


class BooleanMeta(GenericMeta):
    def accept(cls, visitor: "AbstractTypeVisitor") -> t.Any:
        return visitor.visit_boolean(cls)


class Boolean(metaclass=BooleanMeta):
    pass


TM = t.TypeVar("TM", bound="TypingMeta")


class TypingMeta(GenericMeta, type):
    __final__ = False

    def __cls_init__(cls: TM, parameters: t.Any) -> None:
        raise NotImplementedError(type(cls))

    def __cls_repr__(cls: TM) -> str:
        raise NotImplementedError(type(cls))

    def __getitem__(cls: TM, parameters: t.Any) -> TM:
        if cls.__final__:
            raise TypeError("Cannot substitute parameters in {!r}".format(cls))
        type_ = cls.__class__(cls.__name__, cls.__bases__, dict(cls.__dict__))
        type_.__cls_init__(parameters)
        type_.__final__ = True
        return type_

    def __repr__(self) -> str:
        if self.__final__:
            return self.__cls_repr__()
        else:
            return super(TypingMeta, self).__repr__()

    def __hash__(self) -> int:
        return hash(self.__name__)


def is_kind(obj: t.Any) -> bool:
    """Checks that object is a scalar kind with all parameters substituted"""
    if isinstance(obj, TypingMeta):
        return obj.__final__
    return isinstance(obj, GenericMeta)


class OptionalMeta(TypingMeta):
    __type__: GenericMeta

    def __cls_init__(cls, type_: GenericMeta) -> None:
        if not is_kind(type_):
            raise TypeError("Invalid scalar kind: {!r}".format(type_))
        cls.__type__ = type_

    def __cls_repr__(self) -> str:
        return "{}[{!r}]".format(self.__name__, self.__type__)

    def accept(cls, visitor: "AbstractTypeVisitor") -> t.Any:
        return visitor.visit_optional(cls)


class Optional(metaclass=OptionalMeta):
    pass


class EnumMeta(TypingMeta):
    __type_name__: str
    __values__: t.Tuple[str, ...]

    def __cls_init__(
        cls,
        params: t.Union[
            t.Type[enum.Enum], t.Tuple[str, t.Iterable[t.Union[str, t.Any]]]
        ],
    ) -> None:
        if isinstance(params, type) and issubclass(params, enum.Enum):
            cls.__type_name__ = params.__name__
            cls.__values__ = tuple(member.name for member in params)
        else:
            name, values = params
            cls.__type_name__ = name
            cls.__values__ = tuple(values)

    def __cls_repr__(self) -> str:
        return "{}[{!r}, {!r}]".format(
            self.__name__, self.__type_name__, list(self.__values__)
        )

    def accept(cls, visitor: "AbstractTypeVisitor") -> t.Any:
        return visitor.visit_enum(cls)


class Enum(metaclass=EnumMeta):
    pass


class ConstantMeta(TypingMeta):
    __value__: t.Any

    def __cls_init__(cls, value: t.Any) -> None:
        cls.__value__ = value

    def __cls_repr__(self) -> str:
        return "{}[{!r}]".format(self.__name__, self.__value__)

    def accept(cls, visitor: "AbstractTypeVisitor") -> t.Any:
        return visitor.visit_constant(cls)


class Constant(metaclass=ConstantMeta):
    pass


class CustomMeta(TypingMeta):
    __type_name__: str

    def __cls_init__(cls, *args: str) -> None:
        assert len(args) == 1, f"{cls.__name__} takes exactly one argument"

        cls.__type_name__ = args[0]

    def __cls_repr__(self) -> str:
        return "{}[{!r}]".format(self.__name__, self.__type_name__)

    def accept(cls, visitor: "AbstractTypeVisitor") -> t.Any:
        return visitor.visit_custom(cls)


class Custom(metaclass=CustomMeta):
    pass


class AbstractTypeVisitor(ABC):
    def visit(self, obj: GenericMeta) -> t.Any:
        return obj.accept(self)

    @abstractmethod
    def visit_number(self, obj: NumberMeta) -> t.Any:
        pass

    @abstractmethod
    def visit_string(self, obj: StringMeta) -> t.Any:
        pass

    @abstractmethod
    def visit_boolean(self, obj: BooleanMeta) -> t.Any:
        pass

    @abstractmethod
    def visit_optional(self, obj: OptionalMeta) -> t.Any:
        pass

    @abstractmethod
    def visit_enum(self, obj: EnumMeta) -> t.Any:
        pass

    @abstractmethod
    def visit_constant(self, obj: ConstantMeta) -> t.Any:
        pass

    @abstractmethod
    def visit_custom(self, obj: CustomMeta) -> t.Any:
        pass


class TypeVisitor(AbstractTypeVisitor):
    def visit_number(self, obj: NumberMeta) -> t.Any:
        pass

    def visit_string(self, obj: StringMeta) -> t.Any:
        pass

    def visit_boolean(self, obj: BooleanMeta) -> t.Any:
        pass

    def visit_optional(self, obj: OptionalMeta) -> t.Any:
        self.visit(obj.__type__)

    def visit_enum(self, obj: EnumMeta) -> t.Any:
        pass

    def visit_constant(self, obj: ConstantMeta) -> t.Any:
        pass

    def visit_custom(self, obj: CustomMeta) -> t.Any:
        pass

