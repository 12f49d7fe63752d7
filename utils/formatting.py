"""Display helpers shared by the console renderers."""

from __future__ import annotations

import re
from typing import Optional

from rich.text import Text

HIGHLIGHT_STYLE = "black on yellow"


def format_count(value: int) -> str:
    """Compact follower counts: 999 -> "999", 1234 -> "1.2K", 2500000 -> "2.5M"."""
    number = int(value or 0)
    if number >= 1_000_000:
        return f"{number / 1_000_000:.1f}M"
    if number >= 1_000:
        return f"{number / 1_000:.1f}K"
    return str(number)


def website_url(blog: Optional[str]) -> Optional[str]:
    value = str(blog or "").strip()
    if not value:
        return None
    if value.startswith("http"):
        return value
    return f"https://{value}"


def twitter_url(handle: Optional[str]) -> Optional[str]:
    value = str(handle or "").strip().lstrip("@")
    if not value:
        return None
    return f"https://twitter.com/{value}"


def highlight_keyword(text: Optional[str], keyword: Optional[str], style: str = HIGHLIGHT_STYLE) -> Text:
    """Return *text* as a rich Text with case-insensitive matches of *keyword* styled.

    The keyword is matched literally, so regex metacharacters typed by the
    user never break rendering.
    """
    rendered = Text(str(text or ""))
    needle = str(keyword or "").strip()
    if not needle or not rendered.plain:
        return rendered
    rendered.highlight_regex(f"(?i){re.escape(needle)}", style=style)
    return rendered
