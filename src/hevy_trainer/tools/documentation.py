"""
Markdown documentation for the query tools.

Built from the registered tools themselves, so the text an agent host shows
always matches the tools' names, summaries and parameters.
"""

from typing import Any, Dict, List, Sequence

from langchain_core.tools import BaseTool

TOOLS_DOCUMENTATION_URI = "file:///tools/documentation"

DOCUMENTATION_TITLE = "# Hevy Trainer Tools"
DOCUMENTATION_INTRO = "This document describes all available tools in Hevy Trainer."


def _summary(description: str) -> str:
    """First paragraph of a tool description, joined onto one line."""
    paragraph = description.strip().split("\n\n", 1)[0]
    return " ".join(line.strip() for line in paragraph.splitlines())


def _format_parameter(name: str, schema: Dict[str, Any]) -> str:
    line = f"- `{name}`"
    if "default" in schema:
        line += f" (default: {schema['default']!r})"
    return line


def format_tool_documentation(tools: Sequence[BaseTool]) -> str:
    """Render one markdown section per tool."""
    sections: List[str] = [DOCUMENTATION_TITLE, DOCUMENTATION_INTRO]
    for t in tools:
        lines = [f"## {t.name}", _summary(t.description or "")]
        if t.args:
            lines.append("")
            lines.append("**Parameters:**")
            lines.extend(_format_parameter(name, schema) for name, schema in t.args.items())
        else:
            lines.append("")
            lines.append("No parameters required.")
        sections.append("\n".join(lines))
    return "\n\n".join(sections)


def get_tools_documentation(tools: Sequence[BaseTool]) -> Dict[str, Any]:
    """Tool documentation as a readable resource payload."""
    return {
        "contents": [
            {
                "uri": TOOLS_DOCUMENTATION_URI,
                "text": format_tool_documentation(tools),
                "mimeType": "text/markdown",
            }
        ]
    }
