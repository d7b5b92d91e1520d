"""
timereg-mcp - time registrations from markdown daily notes.

Reads `### HH:MM` entries with `[client::...]` and `[hours::...]` tags out of
daily notes, validates them against the expected working hours and serves
day, week and month overviews over MCP.

Stack:
- Python + FastMCP
- PyYAML (settings file)
- Markdown daily notes (source of truth, never written)
"""

__version__ = "0.1.0"
