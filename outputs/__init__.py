"""
Outputs Module
Terminal rendering of search results
"""
from .renderers import render_pagination, render_profile, render_session

__all__ = [
    "render_pagination",
    "render_profile",
    "render_session",
]
