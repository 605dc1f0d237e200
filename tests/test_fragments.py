import pytest

from gqlshape.builder import fragment, params, query, spread, types, var
from gqlshape.export.graphql import Exporter, print_node, render
from gqlshape.fragments import FragmentRegistry


USER = fragment("userFragment", "User", {
    "id": types.number,
    "name": types.string,
})


def test_fragment():
    assert render(query({"me": {**spread(USER)}})) == (
        "query {\n"
        "  me {\n"
        "    ...userFragment\n"
        "  }\n"
        "}\n"
        "\n"
        "fragment userFragment on User {\n"
        "  id\n"
        "  name\n"
        "}"
    )


def test_fragment_is_defined_once():
    operation = query("users", {
        "user": {**spread(USER)},
        "users": [{**spread(USER), "email": types.string}],
        "admins": [{**spread(USER)}],
    })
    text = render(operation)
    assert text.count("fragment userFragment on User {") == 1
    assert text.count("...userFragment") == 3
    assert text.endswith(
        "fragment userFragment on User {\n  id\n  name\n}"
    )


def test_equal_fragments_are_the_same_definition():
    copy = fragment("userFragment", "User", {
        "id": types.number,
        "name": types.string,
    })
    text = render(query({"a": {**spread(USER)}, "b": {**spread(copy)}}))
    assert text.count("fragment userFragment") == 1


def test_nested_fragments():
    avatar = fragment("avatar", "Image", {"url": types.string})
    profile = fragment("profile", "User", {
        "name": types.string,
        "avatar": {**spread(avatar)},
    })
    post = fragment("post", "Post", {"title": types.string})
    operation = query({
        "posts": [{**spread(post)}],
        "user": {**spread(profile)},
        "images": [{**spread(avatar)}],
    })
    assert render(operation) == (
        "query {\n"
        "  posts {\n"
        "    ...post\n"
        "  }\n"
        "  user {\n"
        "    ...profile\n"
        "  }\n"
        "  images {\n"
        "    ...avatar\n"
        "  }\n"
        "}\n"
        "\n"
        "fragment post on Post {\n"
        "  title\n"
        "}\n"
        "\n"
        "fragment profile on User {\n"
        "  name\n"
        "  avatar {\n"
        "    ...avatar\n"
        "  }\n"
        "}\n"
        "\n"
        "fragment avatar on Image {\n"
        "  url\n"
        "}"
    )


def test_fragment_spread_inside_params():
    operation = query("getUser", params({"$id": "ID!"}, {
        "user": params({"id": var("id")}, {**spread(USER)}),
    }))
    assert render(operation).startswith(
        "query getUser($id: ID!) {\n"
        "  user(id: $id) {\n"
        "    ...userFragment\n"
        "  }\n"
        "}\n\nfragment userFragment on User {"
    )


def test_fragment_with_variables():
    friends = fragment("friends", "User", {
        "friends": params({"first": var("first")}, [{"id": types.number}]),
    })
    operation = query("q", params({"$first": "Int"}, {
        "me": {**spread(friends)},
    }))
    assert render(operation).endswith(
        "fragment friends on User {\n"
        "  friends(first: $first) {\n"
        "    id\n"
        "  }\n"
        "}"
    )


def test_register():
    registry = FragmentRegistry()
    assert registry.register(USER) is True
    assert registry.register(USER) is False
    assert "userFragment" in registry
    assert len(registry) == 1


def test_register_different_definition():
    registry = FragmentRegistry()
    registry.register(USER)
    other = fragment("userFragment", "User", {"id": types.number})
    with pytest.raises(AssertionError):
        registry.register(other)


def test_render_all():
    avatar = fragment("avatar", "Image", {"url": types.string})
    profile = fragment("profile", "User", {"avatar": {**spread(avatar)}})
    registry = FragmentRegistry()
    registry.register(profile)
    assert not registry.is_defined("profile")

    definitions = registry.render_all(Exporter(registry))
    assert [d.name.value for d in definitions] == ["profile", "avatar"]
    assert print_node(definitions[0]) == (
        "fragment profile on User {\n  avatar {\n    ...avatar\n  }\n}"
    )
    assert print_node(definitions[1]) == (
        "fragment avatar on Image {\n  url\n}"
    )
    assert registry.is_defined("avatar")


def test_registry_is_not_shared():
    operation = query({"me": {**spread(USER)}})
    assert render(operation) == render(operation)
