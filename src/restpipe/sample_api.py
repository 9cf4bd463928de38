"""Sample typed API client built on the restpipe pipeline.

Shows how a versioned REST API (groups and users) is wrapped: each resource
client holds the shared :class:`~restpipe.networking.Client` and turns calls
into ``do_request*`` invocations with per-call options.
"""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from typing import Any, Mapping

from .networking import (
    CallContext,
    Client,
    Option,
    new_client,
    with_body_opt,
    with_headers_opt,
    with_query_opt,
)

GROUP_API_V1_PATH = "/api/v1/groups"
USER_API_V1_PATH = "/api/v1/users"


@dataclass
class Group:
    id: str
    name: str
    description: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Group:
        return cls(
            id=data["id"],
            name=data["name"],
            description=data["description"],
        )


@dataclass
class User:
    name: str
    age: int
    id: str | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> User:
        return cls(id=data.get("id"), name=data["name"], age=data["age"])

    def to_dict(self) -> dict[str, Any]:
        payload = asdict(self)
        if not payload["id"]:
            del payload["id"]
        return payload


def _groups(data: Any) -> list[Group]:
    return [Group.from_dict(item) for item in data]


class GroupV1Client:
    def __init__(self, client: Client) -> None:
        self._client = client

    def list_groups(self, context: CallContext | None = None) -> list[Group]:
        """Return all groups in server order."""
        return self._client.get_json(
            GROUP_API_V1_PATH, _groups, context=context
        ).unwrap()

    def delete_group(
        self, group: str, context: CallContext | None = None
    ) -> None:
        self._client.do_request_no_body(
            "DELETE",
            GROUP_API_V1_PATH,
            with_query_opt({"id": group}),
            context=context,
        ).unwrap()


class UserV1Client:
    def __init__(self, client: Client) -> None:
        self._client = client

    def create_user(
        self, user: User, context: CallContext | None = None
    ) -> User:
        """Create ``user`` and return the stored representation."""
        headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
        }
        return self._client.do_request_json(
            "POST",
            USER_API_V1_PATH,
            User.from_dict,
            with_body_opt(json.dumps(user.to_dict())),
            with_headers_opt(headers),
            context=context,
        ).unwrap()


class V1Client:
    def __init__(self, client: Client) -> None:
        self._group = GroupV1Client(client)
        self._user = UserV1Client(client)

    def group(self) -> GroupV1Client:
        return self._group

    def user(self) -> UserV1Client:
        return self._user


class MyApiClient:
    """Entry point of the sample API, grouped by version."""

    def __init__(self, endpoint: str, *options: Option) -> None:
        self._client = new_client(endpoint, *options)
        self._v1 = V1Client(self._client)

    def v1(self) -> V1Client:
        return self._v1

    def close(self) -> None:
        self._client.close()
