"""The editing tools and the palette that selects one of them."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class Tool(enum.Enum):
    SELECT = enum.auto()
    VERTEX = enum.auto()
    EDGE = enum.auto()
    CROP = enum.auto()


@dataclass(frozen=True)
class ToolAction:
    """A palette entry: the tool, its label and its icon resource."""

    tool: Tool
    label: str
    icon: str


ACTIONS: tuple[ToolAction, ...] = (
    ToolAction(Tool.SELECT, "Select (s)", ":/images/tikzit-tool-select.svg"),
    ToolAction(Tool.VERTEX, "Add Vertex (v)", ":/images/tikzit-tool-node.svg"),
    ToolAction(Tool.EDGE, "Add Edge (e)", ":/images/tikzit-tool-edge.svg"),
)


class ToolPalette:
    """An exclusive choice among the available editing tools, starting with Select."""

    title = "Tools"

    def __init__(self) -> None:
        self.actions = ACTIONS
        self._current = Tool.SELECT

    def current_tool(self) -> Tool:
        return self._current

    def set_current_tool(self, tool: Tool) -> None:
        """Make ``tool`` the checked tool; a tool not on the palette is rejected."""
        if all(action.tool is not tool for action in self.actions):
            raise ValueError(f"tool not available on the palette: {tool.name}")
        self._current = tool