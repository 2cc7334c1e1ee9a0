"""
Purpose:
- Load the source allow-list from config + an optional file.
- Normalize provider display links and check them against the allow-list.

Notes:
- Matching is plain, case-sensitive string comparison. No URL parsing:
  the provider already hands us a bare host in displayLink.
"""

from __future__ import annotations
from typing import List, Optional, Sequence
from pathlib import Path

def _read_lines(path: Path) -> List[str]:
    if not path.exists():
        return []
    text = path.read_text(encoding="utf-8")
    return [ln.strip() for ln in text.splitlines() if ln.strip() and not ln.strip().startswith("#")]

def load_allow_list(file_path: Optional[Path], defaults: Sequence[str]) -> List[str]:
    """
    Merge configured defaults with domains listed in file_path (one per line).
    Order is kept (defaults first) and duplicates dropped.
    """
    file_domains = _read_lines(file_path) if file_path else []
    return list(dict.fromkeys([d.strip() for d in defaults if d.strip()] + file_domains))

def extract_domain(display_link: str) -> str:
    """Strip a leading "www." from the provider's displayLink."""
    if len(display_link) > 4 and display_link.startswith("www."):
        return display_link[4:]
    return display_link

def build_site_filter(allowed: Sequence[str]) -> str:
    # Google reads a space-separated siteSearch as "any of these sites"
    return " ".join(allowed)

def is_allowed_source(source: str, allowed: Sequence[str]) -> bool:
    """True if source equals an allowed domain or is a subdomain of one."""
    for dom in allowed:
        if source == dom:
            return True
        if len(source) > len(dom) and source.endswith("." + dom):
            return True
    return False
