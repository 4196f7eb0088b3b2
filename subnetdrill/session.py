"""
Practice session state for SubnetDrill.
"""

import logging
import random
from dataclasses import dataclass, field
from typing import List, Mapping, Optional, Sequence, Union

from . import config
from .checker import FieldSet, check_subnet, explain_subnet
from .exercise import Puzzle, generate_puzzle

logger = logging.getLogger(__name__)


@dataclass
class CheckReport:
    """Outcome of checking one submission against the current puzzle."""

    results: List[bool]
    explanations: List[str]
    streak: int
    best_streak: int

    @property
    def all_correct(self) -> bool:
        return all(self.results)


@dataclass
class PracticeSession:
    """
    Owns the current puzzle and the streak counters for one student.

    The engine functions are stateless; everything that changes between
    rounds lives here.
    """

    rng: random.Random = field(default_factory=lambda: random.Random(config.RANDOM_SEED))
    puzzle: Optional[Puzzle] = None
    streak: int = 0
    best_streak: int = 0

    def new_question(self, difficulty: str) -> Puzzle:
        self.puzzle = generate_puzzle(difficulty, self.rng)
        return self.puzzle

    def check(self, rows: Sequence[Union[FieldSet, Mapping[str, str]]]) -> CheckReport:
        """
        Check one answer row per subnet and update the streak.

        Missing rows count as wrong answers.
        """
        if self.puzzle is None:
            raise RuntimeError("No active exercise; call new_question() first")

        results = []
        explanations = []
        for i, (hosts, expected) in enumerate(zip(self.puzzle.requirements, self.puzzle.allocations)):
            row = rows[i] if i < len(rows) else FieldSet()
            if not isinstance(row, FieldSet):
                row = FieldSet.from_mapping(row)

            good = check_subnet(expected, row)
            results.append(good)
            if not good:
                explanations.append(f"Subnet {i + 1} ({hosts} hosts)\n\n{explain_subnet(expected, hosts)}")

        if all(results):
            self.streak += 1
            self.best_streak = max(self.best_streak, self.streak)
        else:
            self.streak = 0

        logger.debug(f"Checked {self.puzzle.base}: {results}, streak {self.streak}")
        return CheckReport(results, explanations, self.streak, self.best_streak)
