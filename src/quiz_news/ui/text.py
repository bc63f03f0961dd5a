"""Plain-text rendering of the news and subjects screens."""

from collections.abc import Sequence

from quiz_news.presenter import DetailView, Failure, Loading, Success, ViewState

LOADING_TEXT = "Loading news..."
EMPTY_TEXT = "No news available"
NEXT_ACTION = "Next: Subjects"


def render_state(state: ViewState, *, footer: Sequence[str] = ()) -> str:
    """Render whichever of the three news screens ``state`` selects.

    ``footer`` lines are appended under a non-empty list, after the
    ``Next: Subjects`` action; callers use it for their own usage hints.
    """
    if isinstance(state, Loading):
        return LOADING_TEXT
    if isinstance(state, Failure):
        return f"Error: {state.message}"
    if isinstance(state, Success):
        if state.is_empty:
            return EMPTY_TEXT
        return _render_list(state, footer)
    msg = f"Unknown view state: {state!r}"
    raise TypeError(msg)


def _render_list(state: Success, footer: Sequence[str]) -> str:
    lines = ["News", ""]
    for number, item in enumerate(state.items, start=1):
        lines.append(f"[{number}] {item.title}")
        if item.summary:
            lines.append(f"    {item.summary}")
    lines.append("")
    lines.append(f"> {NEXT_ACTION}")
    lines.extend(footer)
    return "\n".join(lines)


def render_detail(detail: DetailView) -> str:
    """Render the item popup with its close action."""
    return "\n".join([detail.title, "-" * max(len(detail.title), 1), detail.details, "", "[Close]"])


def render_subjects(names: list[str]) -> str:
    """Render the subjects screen, one selectable line per subject."""
    lines = ["Subjects", ""]
    lines.extend(f"  {name} >" for name in names)
    return "\n".join(lines)
