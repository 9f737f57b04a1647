"""Request recording and payload builders shared by the client tests."""

from collections.abc import Callable
from typing import Any

import httpx


def make_invitation_json(invitation_id: int = 42, permissions: str = "write") -> dict[str, Any]:
    """Build an invitation object shaped like the API's responses."""
    octocat = {
        "id": 1,
        "login": "octocat",
        "html_url": "https://github.com/octocat",
        "type": "User",
        "site_admin": False,
    }
    return {
        "id": invitation_id,
        "repository": {
            "id": 7,
            "name": "hello-world",
            "full_name": "octocat/hello-world",
            "owner": octocat,
            "private": False,
            "html_url": "https://github.com/octocat/hello-world",
            "description": "My first repository",
        },
        "invitee": {"id": 2, "login": "invitee", "type": "User", "site_admin": False},
        "inviter": octocat,
        "permissions": permissions,
        "created_at": "2016-06-13T14:52:50Z",
        "url": f"https://api.github.com/user/repository_invitations/{invitation_id}",
        "html_url": "https://github.com/octocat/hello-world/invitations",
        "expired": False,
    }


class RecordingHandler:
    """httpx.MockTransport handler that records requests and replays responses."""

    def __init__(self, respond: Callable[[httpx.Request], httpx.Response]) -> None:
        self.respond = respond
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.respond(request)


