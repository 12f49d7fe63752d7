"""
Output Renderers
Render a search session to the terminal with rich
"""

from __future__ import annotations

from typing import List, Optional

from rich.console import Console, Group
from rich.panel import Panel
from rich.text import Text

from aggregator.session import SearchSession, SearchStatus
from models import EnrichedProfile, PaginationWindow
from utils.formatting import format_count, highlight_keyword, twitter_url, website_url


def render_profile(profile: EnrichedProfile, keyword: str = "") -> Panel:
    """One result row: name, bio and the detail line."""
    title = Text(profile.display_name, style="bold")
    title.append(f"  @{profile.login}", style="dim")

    lines: List[Text] = [title]
    if profile.bio:
        lines.append(highlight_keyword(profile.bio, keyword))

    details: List[Text] = []
    if profile.location:
        details.append(Text("📍 ").append(highlight_keyword(profile.location, keyword)))
    website = website_url(profile.blog)
    if website:
        details.append(Text(f"🔗 {website}", style=f"link {website}"))
    twitter = twitter_url(profile.twitter_username)
    if twitter:
        details.append(Text(f"@{profile.twitter_username}", style=f"link {twitter}"))
    if profile.company:
        details.append(Text("🏢 ").append(highlight_keyword(profile.company, keyword)))
    if details:
        lines.append(Text("   ").join(details))

    stats = Text(
        f"{format_count(profile.followers)} followers · {format_count(profile.following)} following",
        style="dim",
    )
    if profile.dominant_language:
        stats.append(f"   Most used: {profile.dominant_language}", style="cyan")
    lines.append(stats)

    return Panel(Group(*lines), border_style="grey50", subtitle=profile.html_url or None)


def render_pagination(window: PaginationWindow) -> Text:
    """Page picker line, e.g. ``‹ 1 … 9 [10] 11 … 20 ›``."""
    line = Text(justify="center")
    line.append("‹ ", style="bold" if window.has_previous else "dim")
    for entry in window.entries:
        if entry == window.current_page:
            line.append(f"[{entry}]", style="reverse")
        else:
            line.append(str(entry), style="dim" if isinstance(entry, str) else "")
        line.append(" ")
    line.append("›", style="bold" if window.has_next else "dim")
    return line


def render_session(console: Console, session: SearchSession, keyword: Optional[str] = None) -> None:
    """Print whichever single state the session is in."""
    keyword = session.keyword if keyword is None else keyword

    if session.status == SearchStatus.ERROR:
        console.print(Text(session.message or "", style="red"), justify="center")
        return
    if session.status != SearchStatus.POPULATED:
        console.print(Text(session.message or "", style="dim"), justify="center")
        return

    console.print(Text(f"Found {session.total_count:,} users", style="dim"))
    for profile in session.users:
        console.print(render_profile(profile, keyword))

    window = session.pagination()
    if window is not None:
        console.print(render_pagination(window))
        console.print(Text(f"Page {session.current_page} of {session.total_pages}", style="dim"), justify="center")
