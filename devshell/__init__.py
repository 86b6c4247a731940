"""Developer console, command registry, printing, asset lookup and local-client helpers for a small game engine."""

__version__ = "0.1.0"

__all__ = [
    "assets",
    "clients",
    "commands",
    "console",
    "devcon",
    "devgui",
    "mathutil",
    "parsing",
    "printing",
    "strcompare",
    "strsearch",
    "strslice",
]