"""
Purpose:
- The fixed list of query terms we pick from.
- QueryPicker: uniform random choice over that list, safe to call from
  concurrent request threads.
"""

from __future__ import annotations
import random
import threading
import time
from typing import Optional, Sequence

QUERY_TERMS: tuple[str, ...] = (
    "glitch art",
    "dark aesthetic",
    "cyberpunk",
    "neon lights",
    "vaporwave",
    "synthwave",
    "dark mode",
    "high contrast",
    "abstract dark",
    "digital art",
    "pixel art",
    "retro dark",
    "noir",
    "monochrome",
    "dark minimalism",
    "glitch effect",
    "dark fantasy",
    "gothic",
    "dark architecture",
    "neon aesthetic",
    "dark city",
    "night photography",
    "dark abstract",
    "contrast photography",
    "dark textures",
    "glitch aesthetic",
    "dark patterns",
    "neon aesthetic",
    "dark mood",
    "high contrast photography",
    "dark cyber",
    "glitchy",
    "dark neon",
    "minimalist dark",
    "dark geometric",
    "neon glow",
    "dark surreal",
    "glitchcore",
    "dark futuristic",
    "neon city",
    "dark minimal",
    "high contrast art",
    "dark digital",
    "neon art",
    "glitch photography",
    "dark modern",
    "neon abstract",
    "dark tech",
    "contrast art",
    "dark visual",
    # color-led variants
    "red neon",
    "blue cyberpunk",
    "purple glitch",
    "green neon",
    "cyan aesthetic",
    "magenta dark",
    "orange glow",
    "yellow neon",
    "pink cyber",
    "red cyberpunk",
    "blue neon lights",
    "purple vaporwave",
    "green glitch",
    "cyan synthwave",
    "magenta aesthetic",
    "orange dark",
    "yellow glow",
    "pink neon",
    "red dark aesthetic",
    "blue glitch art",
    "purple cyberpunk",
    "green neon city",
    "cyan dark mode",
    "magenta high contrast",
    "orange abstract dark",
    "yellow digital art",
    "pink pixel art",
    "red retro dark",
    "blue noir",
    "purple monochrome",
    "green dark minimalism",
    "cyan glitch effect",
    "magenta dark fantasy",
    "orange gothic",
    "yellow dark architecture",
    "pink neon aesthetic",
    "red dark city",
    "blue night photography",
    "purple dark abstract",
    "green contrast photography",
    "cyan dark textures",
    "magenta glitch aesthetic",
    "orange dark patterns",
    "yellow dark mood",
    "pink high contrast photography",
    "red dark cyber",
    "blue glitchy",
    "purple dark neon",
    "green minimalist dark",
    "cyan dark geometric",
    "magenta neon glow",
    "orange dark surreal",
    "yellow glitchcore",
    "pink dark futuristic",
    "red neon city",
    "blue dark minimal",
    "purple high contrast art",
    "green dark digital",
    "cyan neon art",
    "magenta glitch photography",
    "orange dark modern",
    "yellow neon abstract",
    "pink dark tech",
    "red contrast art",
    "blue dark visual",
    "electric blue",
    "neon red",
    "cyber purple",
    "glitch green",
    "dark cyan",
    "neon magenta",
    "vaporwave orange",
    "synthwave yellow",
    "aesthetic pink",
    "dark red",
    "neon blue",
    "cyber green",
    "glitch cyan",
    "dark magenta",
    "neon orange",
    "vaporwave yellow",
    "synthwave pink",
)

class QueryPicker:
    """
    Picks one term per call, independently and uniformly.

    The random source can be injected (e.g. random.Random(42) in tests);
    by default it is seeded once from the clock.
    """

    def __init__(self, terms: Sequence[str] = QUERY_TERMS, rng: Optional[random.Random] = None):
        if not terms:
            raise ValueError("query vocabulary must not be empty")
        self.terms = tuple(terms)
        self._rng = rng or random.Random(time.time_ns())
        self._lock = threading.Lock()

    def pick(self) -> str:
        with self._lock:
            return self._rng.choice(self.terms)
