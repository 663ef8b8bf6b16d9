# emoji_index/popularity.py
"""
PopularityTracker
Counts how often each emoji was picked so suggestions can float the
user's favourites to the top.
 - in-memory counters, optional JSON file persistence
 - corrupt/missing file -> start from zero (logged, never raised)
"""

from __future__ import annotations

import json
import os
from collections import defaultdict
from typing import Any, Dict, List, Optional, Tuple

from emoji_index.utils.logger_utils import Log


class PopularityTracker:
    """
    Public API:
      record(glyph)
      count(glyph)
      top(n)
      reset()
      stats()
      save()
    """

    def __init__(self, path: Optional[str] = None, *, autosave: bool = True):
        self.path = path
        self.autosave = autosave and path is not None
        self._counts: Dict[str, int] = defaultdict(int)
        self._load_previous()

    # Event recording --------------------------------------------------------------
    def record(self, glyph: str) -> int:
        """Count one use of `glyph`; returns the new count."""
        if not glyph:
            return 0
        self._counts[glyph] += 1
        if self.autosave:
            self.save()
        return self._counts[glyph]

    # Stats/queries -------------------------------------------------------------------------
    def count(self, glyph: str) -> int:
        return self._counts.get(glyph, 0)

    def top(self, n: int = 10) -> List[Tuple[str, int]]:
        """Most used glyphs, highest count first, ties by glyph."""
        return sorted(self._counts.items(), key=lambda kv: (-kv[1], kv[0]))[:n]

    def as_dict(self) -> Dict[str, int]:
        return dict(self._counts)

    def stats(self) -> Dict[str, Any]:
        return {
            "total_uses": sum(self._counts.values()),
            "unique_emojis": len(self._counts),
            "top": self.top(10),
        }

    def reset(self) -> None:
        self._counts.clear()
        if self.autosave:
            self.save()
        Log.info("[Popularity] statistics reset")

    # Persistence ----------------------------------------------------------------------
    def save(self) -> None:
        if not self.path:
            return
        folder = os.path.dirname(self.path)
        if folder:
            os.makedirs(folder, exist_ok=True)
        try:
            with open(self.path, "w", encoding="utf-8") as fh:
                json.dump(dict(self._counts), fh, indent=2, ensure_ascii=False)
        except OSError as e:
            Log.error(f"[Popularity] save failed: {e}")

    def _load_previous(self) -> None:
        if not self.path or not os.path.exists(self.path):
            return
        try:
            with open(self.path, "r", encoding="utf-8") as fh:
                raw = json.load(fh)
        except (OSError, ValueError) as e:
            Log.warning(f"[Popularity] load failed: {e}")
            return
        if not isinstance(raw, dict):
            Log.warning(f"[Popularity] ignoring {self.path}: not an object")
            return
        for glyph, n in raw.items():
            if isinstance(n, int) and not isinstance(n, bool) and n > 0:
                self._counts[glyph] = n
        Log.info(f"[Popularity] loaded {len(self._counts)} counters")
