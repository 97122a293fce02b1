# meeting_summarizer/core/body_limit.py
from starlette.datastructures import Headers
from starlette.responses import JSONResponse


class PayloadTooLarge(Exception):
    def __init__(self, max_body_bytes: int):
        super().__init__(f"Request body must not exceed {max_body_bytes} bytes")
        self.max_body_bytes = max_body_bytes


def payload_too_large_response(max_body_bytes: int) -> JSONResponse:
    return JSONResponse(
        status_code=413,
        content={
            "error": "Payload too large",
            "details": f"Request body must not exceed {max_body_bytes} bytes",
        },
    )


class BodySizeLimitMiddleware:
    """
    Caps request bodies at max_body_bytes.

    A declared Content-Length over the cap is refused up front. Bodies without one
    (chunked uploads) are counted as they are read, and PayloadTooLarge is raised
    from receive() once the running total passes the cap.
    """

    def __init__(self, app, max_body_bytes: int):
        self.app = app
        self.max_body_bytes = max_body_bytes

    async def __call__(self, scope, receive, send):
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        content_length = Headers(scope=scope).get("content-length")
        if content_length and content_length.isdigit() and int(content_length) > self.max_body_bytes:
            response = payload_too_large_response(self.max_body_bytes)
            await response(scope, receive, send)
            return

        received = 0

        async def limited_receive():
            nonlocal received
            message = await receive()
            if message["type"] == "http.request":
                received += len(message.get("body", b""))
                if received > self.max_body_bytes:
                    raise PayloadTooLarge(self.max_body_bytes)
            return message

        await self.app(scope, limited_receive, send)
