"""
todo.txt MCP server entry point.

Startup sequence:
1. Configure logging from TODOTXT_LOG_LEVEL
2. Register all MCP tools
3. Run MCP server (stdio transport)
"""

import logging
import os
import sys

from mcp.server.fastmcp import FastMCP

from todotxt.tools import register_todo_tools

log = logging.getLogger(__name__)


def main() -> None:
    logging.basicConfig(
        level=os.environ.get("TODOTXT_LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    mcp = FastMCP("todotxt")
    register_todo_tools(mcp)

    log.info("Starting todotxt server")
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
