from .formatting import Stopwatch, format_bid
from .menu import Menu

__all__ = ["Menu", "Stopwatch", "format_bid"]
