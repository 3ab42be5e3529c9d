"""Entrypoint for running the transit MCP server.

Usage:
  python run_mcp_server.py                      # streamable HTTP on :8765/mcp
  python run_mcp_server.py --transport stdio

Or via MCP host config pointing to this script.
"""
from mcp_tools_transit.mcp.server import main

if __name__ == "__main__":
    main()
