from __future__ import annotations

import logging

from fastmcp import FastMCP

from ...api import get_api_functions

INSTRUCTIONS = (
    "Shared Time exposes deterministic availability tools. Compare two calendars, "
    "see which hours are free, busy or double-booked, and get up to three suggested times to meet."
)

logger = logging.getLogger(__name__)


def build_mcp_server() -> FastMCP:
    server = FastMCP(name="shared-time", instructions=INSTRUCTIONS)
    for api_function in get_api_functions():
        logger.debug("Registering MCP tool: %s", api_function.name)
        server.tool(
            api_function.func,
            name=api_function.name,
            description=api_function.description,
            tags=set(api_function.tags),
        )
    return server


def run_mcp_server(host: str = "127.0.0.1", port: int = 8765) -> None:
    import asyncio

    server = build_mcp_server()
    asyncio.run(server.run_http_async(transport="streamable-http", host=host, port=port))
