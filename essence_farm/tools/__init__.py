"""Planner tools.

Each tool is a subpackage that registers itself with the ToolRegistry.
Import this module to auto-register all available tools.
"""

# Import all tool modules to trigger registration
from . import farming
from . import essence
