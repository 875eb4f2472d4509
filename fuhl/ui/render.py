"""Rich rendering of the picker screen."""

from typing import List
from rich.console import Console, Group, RenderableType
from rich.live import Live
from rich.text import Text
from ..utils.constants import PICKER_STYLE, SELECTION_MARKER

# Lines used by the prompt and the counter
HEADER_HEIGHT = 2


def visible_window(selected: int, total: int, height: int) -> range:
    """Return the slice of rows to draw so the selected row stays on screen."""
    height = max(height, 1)
    start = max(0, selected - height + 1)
    return range(start, min(total, start + height))


def build_frame(query: str, items: List[str], selected: int, height: int) -> RenderableType:
    """Build one frame of the picker.

    Args:
        query: Current query text
        items: Display strings of the ranked view, best first
        selected: Index of the highlighted row within ``items``
        height: Terminal height in lines

    Returns:
        RenderableType: Renderable for the whole screen
    """
    prompt = Text.assemble(("> ", PICKER_STYLE["prompt"]), (query, PICKER_STYLE["query"]))
    counter = Text(f"  {len(items)} match{'' if len(items) == 1 else 'es'}", style=PICKER_STYLE["counter"])

    if not items:
        return Group(prompt, counter, Text("  No matches", style=PICKER_STYLE["empty"]))

    rows = []
    for index in visible_window(selected, len(items), height - HEADER_HEIGHT):
        if index == selected:
            row = Text(f"{SELECTION_MARKER} {items[index]}", style=PICKER_STYLE["selected"])
        else:
            row = Text(f"  {items[index]}", style=PICKER_STYLE["item"])
        row.no_wrap = True
        row.overflow = "ellipsis"
        rows.append(row)
    return Group(prompt, counter, *rows)


class RichRenderer:
    """Render sink redrawing a rich ``Live`` display on every frame."""

    def __init__(self, live: Live, console: Console):
        """Initialize the renderer.

        Args:
            live: Active live display (alternate screen)
            console: Console the live display writes to
        """
        self.live = live
        self.console = console

    def render(self, query: str, items: List[str], selected: int) -> None:
        frame = build_frame(query, items, selected, self.console.size.height)
        self.live.update(frame, refresh=True)
