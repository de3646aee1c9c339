"""ProseMirror JSON -> Markdown.

Handles the node types found in Granola's notes panels. Anything else is
rendered as the concatenation of its children, so new node types degrade to
their plain text instead of disappearing.
"""

from __future__ import annotations

from .models import TranscriptSegment


def prosemirror_to_markdown(doc: dict | None) -> str:
    """Convert a ProseMirror document JSON to markdown."""
    if not doc or not isinstance(doc, dict):
        return ""
    return _render_node(doc)


def _children(node: dict) -> list[dict]:
    content = node.get("content")
    if not isinstance(content, list):
        return []
    return [child for child in content if isinstance(child, dict)]


def _render_nodes(nodes: list[dict]) -> str:
    return "".join(_render_node(node) for node in nodes)


def _heading_level(attrs: object) -> int:
    level = attrs.get("level") if isinstance(attrs, dict) else None
    if isinstance(level, bool) or not isinstance(level, int) or level < 1:
        return 1
    return level


def _render_node(node: dict) -> str:
    node_type = node.get("type", "")
    content = _children(node)

    match node_type:
        case "text":
            return _render_text(node)

        case "paragraph":
            text = _render_nodes(content)
            return f"{text}\n\n" if text.strip() else ""

        case "heading":
            prefix = "#" * _heading_level(node.get("attrs"))
            return f"{prefix} {_render_nodes(content)}\n\n"

        case "bulletList":
            return _render_nodes(content)

        case "listItem":
            return f"- {_render_nodes(content)}"

        case "orderedList":
            return _render_ordered(content)

        case "codeBlock":
            return f"```\n{_render_nodes(content)}\n```\n\n"

        case "hardBreak":
            return "\n"

        case _:
            # Unknown node - render children
            if content:
                return _render_nodes(content)
            return ""


def _render_text(node: dict) -> str:
    text = node.get("text", "")
    if not isinstance(text, str):
        text = ""
    marks = node.get("marks")
    if not isinstance(marks, list):
        return text

    for mark in marks:
        mark_type = mark.get("type", "") if isinstance(mark, dict) else ""
        match mark_type:
            case "bold":
                text = f"**{text}**"
            case "italic":
                text = f"*{text}*"
            case "code":
                text = f"`{text}`"

    return text


def _render_ordered(items: list[dict]) -> str:
    parts: list[str] = []
    # Numbering is positional: an item that renders empty still uses its number
    for i, item in enumerate(items, start=1):
        text = _render_node(item)
        if text:
            parts.append(f"{i}. {text}")
    return "".join(parts)


def render_transcript(segments: list[TranscriptSegment]) -> str:
    """Format transcript segments as speaker-labelled paragraphs."""
    lines: list[str] = []
    for segment in segments:
        match segment.source:
            case "microphone":
                lines.append(f"**Me:** {segment.text}")
            case "system":
                lines.append(f"**System:** {segment.text}")
            case _:
                lines.append(segment.text)
    return "\n\n".join(lines)
