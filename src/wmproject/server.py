"""FastMCP server for comparison project files."""

import logging
import os

from mcp.server.fastmcp import FastMCP

from wmproject.tools import project

LOG_LEVEL = os.environ.get("WMPROJECT_LOG_LEVEL", "WARNING")

# Create FastMCP server
mcp = FastMCP("wmproject-mcp")


# Register tools from modules
project.register(mcp)


def main():
    """Run the MCP server."""
    logging.basicConfig(
        level=LOG_LEVEL.upper(),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    mcp.run()


if __name__ == "__main__":
    main()
