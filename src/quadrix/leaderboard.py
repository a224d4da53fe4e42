from __future__ import annotations

import datetime as dt
import json
import logging
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import List, Optional, Tuple, Union

logger = logging.getLogger(__name__)

CAPACITY = 10


class LeaderboardError(Exception):
    """Stored leaderboard could not be decoded."""


def default_scores_path() -> Path:
    return Path.home() / ".quadrix_scores.json"


@dataclass
class LeaderboardEntry:
    name: str
    score: int
    level: int
    date: str = field(default_factory=lambda: dt.date.today().isoformat())


def sort_key(entry: LeaderboardEntry) -> Tuple[int, int, str]:
    return (-entry.score, -entry.level, entry.name.lower())


def compare_entries(a: LeaderboardEntry, b: LeaderboardEntry) -> int:
    """Negative if ``a`` ranks above ``b``, positive if below, 0 on a tie."""
    ka, kb = sort_key(a), sort_key(b)
    return (ka > kb) - (ka < kb)


class Leaderboard:
    def __init__(self, entries: Optional[List[LeaderboardEntry]] = None, capacity: int = CAPACITY) -> None:
        self.capacity = capacity
        self.entries: List[LeaderboardEntry] = sorted(entries or [], key=sort_key)[:capacity]

    def __len__(self) -> int:
        return len(self.entries)

    def qualifies(self, entry: LeaderboardEntry) -> bool:
        if len(self.entries) < self.capacity:
            return True
        return compare_entries(entry, self.entries[-1]) < 0

    def add(self, entry: LeaderboardEntry) -> Optional[int]:
        """Insert ``entry`` and return its 0-based rank, or None if it fell off."""
        if not self.qualifies(entry):
            return None
        self.entries.append(entry)
        self.entries.sort(key=sort_key)
        self.entries = self.entries[: self.capacity]
        return next(i for i, e in enumerate(self.entries) if e is entry)

    @classmethod
    def load(cls, path: Union[str, Path], capacity: int = CAPACITY) -> "Leaderboard":
        path = Path(path)
        if not path.exists():
            logger.debug("no leaderboard at %s, starting empty", path)
            return cls(capacity=capacity)
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
            entries = [
                LeaderboardEntry(str(d["name"]), int(d["score"]), int(d["level"]), str(d["date"]))
                for d in data
            ]
        except (ValueError, TypeError, KeyError) as exc:
            raise LeaderboardError(f"malformed leaderboard file {path}: {exc}") from exc
        return cls(entries, capacity=capacity)

    def save(self, path: Union[str, Path]) -> None:
        path = Path(path)
        path.write_text(json.dumps([asdict(e) for e in self.entries], indent=2), encoding="utf-8")
        logger.debug("saved %d leaderboard entries to %s", len(self.entries), path)
