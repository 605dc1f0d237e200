from .immutable import ImmutableDict
from .names import check_name, check_fragment_name


__all__ = [
    "ImmutableDict",
    "check_name",
    "check_fragment_name",
]
