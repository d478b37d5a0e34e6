"""
victory_tally.py - Win-frequency counts used when the search is inconclusive

During one top-level search every simulated move whose evaluation comes
back as a computer win bumps the count of the column it was played in.
When the minimax score ends up neutral, the column with the most recorded
wins is played instead of an arbitrary one.
"""

from typing import Iterable, List, Optional


class VictoryTally:
    """Per-column win counts for a single top-level decision."""

    def __init__(self, width: int):
        self.width = width
        self.counts: List[int] = [0] * width

    def record(self, column: int):
        self.counts[column] += 1

    def reset(self):
        self.counts = [0] * self.width

    def total(self) -> int:
        return sum(self.counts)

    def best_column(self, candidates: Optional[Iterable[int]] = None) -> int:
        """
        Column with the highest count, the lowest index winning ties.

        Args:
            candidates: Columns to choose from (all columns if None)

        Returns:
            The chosen column

        Raises:
            ValueError: if there are no candidates
        """
        columns = sorted(range(self.width) if candidates is None else candidates)
        if not columns:
            raise ValueError("No candidate columns to choose from")

        best = columns[0]
        for column in columns[1:]:
            if self.counts[column] > self.counts[best]:
                best = column
        return best

    def __repr__(self) -> str:
        return f"VictoryTally({self.counts})"
