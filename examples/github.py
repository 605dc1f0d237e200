import enum
import json
import logging

from gqlshape.builder import (
    alias,
    fragment,
    include,
    on_union,
    params,
    query,
    spread,
    types,
    var,
)
from gqlshape.export.graphql import request


log = logging.getLogger(__name__)


class IssueState(enum.Enum):
    OPEN = "open"
    CLOSED = "closed"


ACTOR = fragment("actor", "Actor", {
    "login": types.string,
    "avatarUrl": types.optional.custom("URI"),
})


ISSUES = query("repositoryIssues", params({
    "$owner": "String!",
    "$name": "String!",
    "$withTimeline": "Boolean!",
}, {
    "repository": params({"owner": var("owner"), "name": var("name")}, {
        "issues": params({"first": 10, "states": [IssueState.OPEN]}, {
            "nodes": [{
                "number": types.number,
                "title": types.string,
                "state": types.one_of(IssueState),
                "author": {**spread(ACTOR)},
                alias("events", "timelineItems"): include(
                    var("withTimeline"),
                    params({"last": 5}, {
                        "nodes": [{
                            "__typename": types.string,
                            **on_union({
                                "ClosedEvent": {
                                    "actor": {**spread(ACTOR)},
                                },
                                "LabeledEvent": {
                                    "label": {"name": types.string},
                                },
                            }),
                        }],
                    }),
                ),
            }],
        }),
    }),
}))


def main():
    logging.basicConfig()
    logging.getLogger("gqlshape").setLevel(logging.DEBUG)
    payload = request(ISSUES, {
        "owner": "graphql-python",
        "name": "graphql-core",
        "withTimeline": True,
    })
    log.info("Request body:\n%s", json.dumps(payload, indent=2))
    print(payload["query"])


if __name__ == "__main__":
    main()
