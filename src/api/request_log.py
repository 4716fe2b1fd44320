"""ASGI middleware logging one line per HTTP request:
METHOD URL STATUS SIZE - LATENCY ms BODY (URL includes the query string; BODY only for POST).
"""

import logging
import time

logger = logging.getLogger("api.requests")


class RequestLogMiddleware:
    def __init__(self, app) -> None:
        self.app = app

    async def __call__(self, scope, receive, send):
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        method = scope["method"]
        url = scope["path"]
        query = scope.get("query_string", b"")
        if query:
            url = f"{url}?{query.decode('latin-1')}"
        started = time.perf_counter()
        body = bytearray()
        response = {"status": 500, "size": "-"}

        async def receive_and_capture():
            message = await receive()
            if method == "POST" and message["type"] == "http.request":
                body.extend(message.get("body", b""))
            return message

        async def send_and_capture(message):
            if message["type"] == "http.response.start":
                response["status"] = message["status"]
                for name, value in message.get("headers", []):
                    if name.lower() == b"content-length":
                        response["size"] = value.decode("latin-1")
            await send(message)

        try:
            await self.app(scope, receive_and_capture, send_and_capture)
        finally:
            elapsed_ms = (time.perf_counter() - started) * 1000
            logger.info(
                "%s %s %s %s - %.3f ms %s",
                method,
                url,
                response["status"],
                response["size"],
                elapsed_ms,
                body.decode("utf-8", errors="replace"),
            )
