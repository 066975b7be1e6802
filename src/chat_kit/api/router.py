"""API操作とHTTPメソッド・パスの対応表"""

from enum import Enum


class HTTPMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"


class Route(Enum):
    """サポートするAPI操作

    値はベースURLに続くパス。
    """

    POST_MESSAGE = "/chat.postMessage"
    POST_EPHEMERAL = "/chat.postEphemeral"
    UPDATE_CHAT = "/chat.update"
    UNFURL_CHAT = "/chat.unfurl"
    CREATE_CHANNEL = "/channels.create"

    @property
    def path(self) -> str:
        return self.value

    @property
    def method(self) -> HTTPMethod:
        return _METHODS[self]


# 現状のAPIはすべてPOST
_METHODS: dict[Route, HTTPMethod] = {
    Route.POST_MESSAGE: HTTPMethod.POST,
    Route.POST_EPHEMERAL: HTTPMethod.POST,
    Route.UPDATE_CHAT: HTTPMethod.POST,
    Route.UNFURL_CHAT: HTTPMethod.POST,
    Route.CREATE_CHANNEL: HTTPMethod.POST,
}
