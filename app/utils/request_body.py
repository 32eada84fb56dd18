from fastapi import Request

from app.errors import ValidationError


async def bare_string_body(request: Request) -> str:
    """Raw request body as text, for endpoints that take a bare enum or id string."""
    raw = await request.body()
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError:
        raise ValidationError("Request body must be UTF-8 text")
