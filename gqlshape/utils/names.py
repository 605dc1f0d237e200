from typing import Any

from graphql.error import GraphQLError
from graphql.type import assert_name

from ..error import DescriptorError, ErrorKind


def check_name(name: Any, what: str = "name") -> str:
    """Checks that ``name`` is a valid GraphQL name

    :param name: value to check
    :param what: human-readable description used in the error message
    :return: the same name
    :raises DescriptorError: with ``INVALID_IDENTIFIER`` kind
    """
    try:
        return assert_name(name)
    except (GraphQLError, TypeError) as e:
        raise DescriptorError(
            ErrorKind.INVALID_IDENTIFIER,
            "Invalid {}: {!r} ({})".format(what, name, e),
        ) from e


def check_fragment_name(name: Any) -> str:
    check_name(name, "fragment name")
    if name == "on":
        raise DescriptorError(
            ErrorKind.INVALID_IDENTIFIER,
            'Invalid fragment name: "on" is reserved',
        )
    return name
