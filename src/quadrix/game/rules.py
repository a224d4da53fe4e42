from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ScoringRules:
    # Points per lock for 1, 2, 3 and 4 cleared rows, multiplied by (level + 1)
    line_clear_factors: tuple[int, int, int, int] = (4, 10, 30, 120)
    lines_per_level: int = 8

    def factor(self, lines: int) -> int:
        if 1 <= lines <= len(self.line_clear_factors):
            return self.line_clear_factors[lines - 1]
        return 0

    def score_for_lines(self, lines: int, level: int) -> int:
        return self.factor(lines) * (level + 1)

    def level_ups(self, total_before: int, lines: int) -> int:
        """Count the multiples of ``lines_per_level`` crossed by this clear."""
        return sum(
            1 for k in range(1, lines + 1) if (total_before + k) % self.lines_per_level == 0
        )


def tick_rate_ms(level: int) -> int:
    """Milliseconds between gravity ticks at ``level``.

    Linear from 800 ms down to 80 ms over levels 0-9, then 50, 20 and a
    floor of 10 ms.
    """
    if level < 0:
        raise ValueError(f"level must be non-negative, got {level}")
    if level <= 9:
        return 800 - 80 * level
    return max(80 - 30 * (level - 9), 10)
