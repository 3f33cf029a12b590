"""ASGI middleware applied to every request."""

from typing import Final

from starlette.types import ASGIApp, Message, Receive, Scope, Send

HTML_CONTENT_TYPE: Final = b"text/html; charset=utf-8"
API_PREFIX: Final = "/api"


class ForceHTMLMiddleware:
    """Rewrite the Content-Type of page responses to HTML.

    Paths under ``/api`` keep whatever type their route produced.
    """

    def __init__(self, app: ASGIApp):
        self.app: Final[ASGIApp] = app

    async def __call__(
        self,
        scope: Scope,
        receive: Receive,
        send: Send,
    ) -> None:
        if scope["type"] != "http" or scope["path"].startswith(API_PREFIX):
            await self.app(scope, receive, send)
            return

        async def send_html(message: Message) -> None:
            if message["type"] == "http.response.start":
                headers = [
                    (name, value)
                    for name, value in message.get("headers", [])
                    if name.lower() != b"content-type"
                ]
                headers.append((b"content-type", HTML_CONTENT_TYPE))
                message["headers"] = headers
            await send(message)

        await self.app(scope, receive, send_html)


class RemoveTrailingSlashMiddleware:
    """Strip trailing slashes from every path except the site root before routing."""

    def __init__(self, app: ASGIApp):
        self.app: Final[ASGIApp] = app

    async def __call__(
        self,
        scope: Scope,
        receive: Receive,
        send: Send,
    ) -> None:
        if scope["type"] == "http" and scope["path"] != "/":
            path = scope["path"].rstrip("/") or "/"
            if path != scope["path"]:
                scope = dict(scope, path=path, raw_path=path.encode())
        await self.app(scope, receive, send)
