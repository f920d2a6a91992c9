"""Reorder API endpoint.

Returns the rename plan for a drag and drop move. Applying the renames
is left to the caller, strictly in the returned order.
"""

from typing import cast

from aiohttp import web

from fsml.api.requests import RequestError, read_body, require_string, require_string_list
from fsml.core.reorder import compute_reorder
from fsml.core.types import POSITIONS, Position


def create_reorder_routes() -> list[web.RouteDef]:
    return [web.post("/api/reorder", post_reorder)]


async def post_reorder(request: web.Request) -> web.Response:
    try:
        data = await read_body(request)
        source = require_string(data, "source")
        target = require_string(data, "target")
        position = require_string(data, "position")
        if position not in POSITIONS:
            raise RequestError(
                f"position must be one of: {', '.join(POSITIONS)}",
                field="position",
            )
        siblings = require_string_list(data, "siblings", default=[])
    except RequestError as e:
        return e.to_response()

    plan = compute_reorder(source, target, cast(Position, position), siblings)
    return web.json_response(plan.to_dict())
