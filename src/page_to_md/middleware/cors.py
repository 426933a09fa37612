from litestar.datastructures import MutableScopeHeaders
from litestar.types import Message, Scope

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET",
    "Access-Control-Allow-Headers": "Content-Type",
}


async def add_cors_headers(message: Message, scope: Scope) -> None:
    """before_send hook stamping permissive CORS headers on every HTTP response.

    Runs at the application edge, so error responses (404, 405, 500) get the
    headers too.
    """
    if message["type"] == "http.response.start":
        headers = MutableScopeHeaders.from_message(message=message)
        for name, value in CORS_HEADERS.items():
            headers[name] = value
