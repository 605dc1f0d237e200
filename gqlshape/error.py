import enum

from typing import List, Optional, Tuple


__all__ = ["ErrorKind", "DescriptorError"]


class ErrorKind(enum.Enum):
    """Enumerates reasons why a descriptor can not be constructed"""

    #: object-shaped selection without fields
    EMPTY_SELECTION = "EmptySelection"
    #: two different fragment definitions share a name
    DUPLICATE_FRAGMENT_NAME = "DuplicateFragmentName"
    #: ``$variable`` is used but not declared by the operation
    UNDECLARED_VARIABLE = "UndeclaredVariable"
    #: field, alias, argument, type or variable name is not a GraphQL name
    INVALID_IDENTIFIER = "InvalidIdentifier"
    #: fragment directly or indirectly spreads itself
    FRAGMENT_CYCLE = "FragmentCycle"


class DescriptorError(Exception):
    def __init__(
        self,
        kind: ErrorKind,
        message: str,
        errors: Optional[List[Tuple[ErrorKind, str]]] = None,
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.errors = errors if errors is not None else [(kind, message)]
