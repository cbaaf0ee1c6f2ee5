"""
Data model shared by the analysis passes.
"""

from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from functools import total_ordering
from typing import Any, Dict, Iterator, List, Optional, Tuple


@total_ordering
class ComplexityClass(Enum):
    """Heuristic asymptotic-cost label for a line or a whole program."""

    CONSTANT = "O(1)"
    LINEAR = "O(n)"
    QUADRATIC = "O(n²)"
    CUBIC = "O(n³)"
    LOG_LINEAR = "O(n log n)"
    UNKNOWN = "Unknown"

    @property
    def notation(self) -> str:
        return self.value

    @property
    def rank(self) -> Optional[int]:
        """Growth rank, or None for UNKNOWN which has no place in the order."""
        return _GROWTH_RANKS.get(self)

    def __lt__(self, other):
        if not isinstance(other, ComplexityClass):
            return NotImplemented
        if self.rank is None or other.rank is None:
            return NotImplemented
        return self.rank < other.rank


_GROWTH_RANKS = {
    ComplexityClass.CONSTANT: 0,
    ComplexityClass.LINEAR: 1,
    ComplexityClass.LOG_LINEAR: 2,
    ComplexityClass.QUADRATIC: 3,
    ComplexityClass.CUBIC: 4,
}


class BlockFrame(Enum):
    """Entry on the nesting stack."""

    LOOP = "loop"
    GENERIC_BLOCK = "block"


@dataclass(frozen=True)
class LineRecord:
    """Classification of one source line. Never mutated after creation."""

    line_number: int
    text: str
    complexity: ComplexityClass
    reason: str
    depth: int = 0
    function: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "line": self.line_number,
            "code": self.text,
            "complexity": self.complexity.name,
            "notation": self.complexity.notation,
            "reason": self.reason,
            "depth": self.depth,
            "function": self.function,
        }


class FunctionRegistry:
    """
    Occurrence counts of apparent function definitions, keyed by name.

    Built once per run by the registry pre-pass and consulted when testing
    whether the active function name reappears as a call target.
    """

    def __init__(self):
        self._counts: Counter = Counter()

    def register(self, name: str) -> None:
        self._counts[name] += 1

    def count(self, name: str) -> int:
        return self._counts.get(name, 0)

    def __contains__(self, name: object) -> bool:
        return name in self._counts

    def __iter__(self) -> Iterator[str]:
        return iter(self._counts)

    def __len__(self) -> int:
        return len(self._counts)

    def as_dict(self) -> Dict[str, int]:
        return dict(self._counts)


@dataclass
class AnalysisState:
    """
    Mutable state of one analysis run.

    Created fresh for every run and discarded when the run completes;
    instances are never shared between runs.
    """

    depth: int = 0
    max_depth: int = 0
    stack: List[BlockFrame] = field(default_factory=list)
    current_function: Optional[str] = None
    registry: FunctionRegistry = field(default_factory=FunctionRegistry)


@dataclass(frozen=True)
class AnalysisResult:
    """Per-line records plus the program-wide verdict of one run."""

    records: Tuple[LineRecord, ...]
    overall: ComplexityClass
    max_depth: int
    functions: Dict[str, int] = field(default_factory=dict)
    recursive_lines: Tuple[int, ...] = ()

    @property
    def recursion_detected(self) -> bool:
        return bool(self.recursive_lines)

    def summary(self) -> Dict[ComplexityClass, int]:
        """Number of lines per complexity class, in declaration order."""
        counts = Counter(record.complexity for record in self.records)
        return {c: counts[c] for c in ComplexityClass if counts[c]}

    def to_dict(self) -> Dict[str, Any]:
        return {
            "overall": {
                "complexity": self.overall.name,
                "notation": self.overall.notation,
            },
            "max_depth": self.max_depth,
            "recursive_lines": list(self.recursive_lines),
            "functions": dict(self.functions),
            "summary": {c.name: n for c, n in self.summary().items()},
            "lines": [record.to_dict() for record in self.records],
        }
