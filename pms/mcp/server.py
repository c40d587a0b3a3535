"""MCP server for the portfolio book."""

from mcp.server.fastmcp import FastMCP

from ..store import EntityStore
from .tools import TOOL_NAMES, PortfolioTools

TOOL_PREFIX = "portfolio_"


def build_mcp_server(store: EntityStore, name: str = "portfolio-management-system") -> FastMCP:
    """A FastMCP server whose ``portfolio_*`` tools read and write ``store``."""
    mcp = FastMCP(name)
    tools = PortfolioTools(store)
    for tool_name in TOOL_NAMES:
        fn = getattr(tools, tool_name)
        mcp.add_tool(fn, name=TOOL_PREFIX + tool_name, description=fn.__doc__)
    return mcp
