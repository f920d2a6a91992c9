"""Request body parsing for API endpoints.

The core functions accept any string, so validation here only
enforces JSON types at the HTTP boundary.
"""

import json

from aiohttp import web


class RequestError(Exception):
    """Malformed API request body."""

    def __init__(self, message: str, **details: object) -> None:
        super().__init__(message)
        self.message = message
        self.details = details

    def to_response(self) -> web.Response:
        """Build a 400 JSON response describing the error."""
        return web.json_response({"error": self.message, **self.details}, status=400)


async def read_body(request: web.Request) -> dict[str, object]:
    """Read the request body as a JSON object.

    Raises:
        RequestError: If the body is not valid JSON or not an object
    """
    try:
        data = await request.json()
    except json.JSONDecodeError as e:
        raise RequestError("Invalid JSON body", detail=str(e)) from e

    if not isinstance(data, dict):
        raise RequestError("Request body must be a JSON object")
    return data


def require_string(data: dict[str, object], key: str) -> str:
    """Get a required string field."""
    value = data.get(key)
    if not isinstance(value, str):
        raise RequestError(f"{key} must be a string", field=key)
    return value


def require_string_list(
    data: dict[str, object],
    key: str,
    *,
    default: list[str] | None = None,
) -> list[str]:
    """Get a list-of-strings field, optionally falling back to a default."""
    value = data.get(key)
    if value is None and default is not None:
        return default
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise RequestError(f"{key} must be a list of strings", field=key)
    return value
