#!/usr/bin/env python3
"""Main entry point for TubeLytics MCP Server

Supports multiple transport modes:
- stdio: For local desktop clients
- streamable-http: For remote access
"""

import os
import sys

from tubelytics.server import HOST, PORT, mcp

if __name__ == "__main__":
    # Get transport mode from environment or command line
    transport = os.getenv("MCP_TRANSPORT", "stdio")

    if len(sys.argv) > 1:
        transport = sys.argv[1]

    print(f"Starting TubeLytics MCP Server with {transport} transport...", file=sys.stderr)

    # Run server with specified transport
    if transport == "stdio":
        mcp.run(transport=transport)
    else:
        mcp.run(transport=transport, host=HOST, port=PORT)
