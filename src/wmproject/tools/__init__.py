"""MCP tools for comparison project files."""
