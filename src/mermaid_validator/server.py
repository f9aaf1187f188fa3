"""MCP Server initialization and tool registration."""

from __future__ import annotations

import json
from typing import Any

from dotenv import load_dotenv
from loguru import logger
from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import TextContent, Tool

from mermaid_validator.config import ServiceConfig, configure_logging
from mermaid_validator.tools import validate_diagram

# Load environment variables
load_dotenv()

# Tool definitions with JSON schemas
TOOLS: dict[str, dict[str, Any]] = {
    "validate_diagram": {
        "description": "Validate Mermaid diagram syntax before rendering. Detects the diagram type, checks bracket balance, subgraph/end pairing, flowchart arrows and sequence message grammar. Returns the first error with its line number and fix suggestions.",
        "inputSchema": {
            "type": "object",
            "properties": {
                "diagram": {
                    "type": "string",
                    "description": "Mermaid diagram text, starting with its type declaration (e.g. 'flowchart TD')",
                },
            },
            "required": ["diagram"],
        },
        "handler": validate_diagram,
    },
}


async def dispatch_tool(name: str, arguments: dict) -> list[TextContent]:
    """Run a registered tool and wrap its result as MCP text content."""
    if name not in TOOLS:
        return [TextContent(type="text", text=f"Unknown tool: {name}")]
    
    handler = TOOLS[name]["handler"]
    
    try:
        logger.info(f"Executing tool: {name}")
        result = await handler(**arguments)
        output = json.dumps(result, indent=2, default=str)
        return [TextContent(type="text", text=output)]
        
    except Exception as e:
        logger.error(f"Tool execution failed: {e}")
        error_msg = json.dumps({
            "error": True,
            "message": str(e),
            "tool": name,
        })
        return [TextContent(type="text", text=error_msg)]


def create_server() -> Server:
    """Create and configure the MCP server."""
    server = Server("mermaid-validator")
    
    @server.list_tools()
    async def list_tools() -> list[Tool]:
        """List all available tools."""
        return [
            Tool(
                name=name,
                description=config["description"],
                inputSchema=config["inputSchema"],
            )
            for name, config in TOOLS.items()
        ]
    
    @server.call_tool()
    async def call_tool(name: str, arguments: dict) -> list[TextContent]:
        """Handle tool invocations."""
        return await dispatch_tool(name, arguments)
    
    return server


async def run_server() -> None:
    """Run the MCP server via stdio."""
    server = create_server()
    
    logger.info("Starting Mermaid Validator MCP server...")
    
    async with stdio_server() as (read_stream, write_stream):
        await server.run(
            read_stream,
            write_stream,
            server.create_initialization_options(),
        )


def main() -> None:
    """CLI entry point."""
    import asyncio
    
    configure_logging(ServiceConfig.from_env().log_level)
    
    asyncio.run(run_server())


if __name__ == "__main__":
    main()
