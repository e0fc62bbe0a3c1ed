"""
Search strategy base class and the records shared by all strategies.

Every strategy implements find_path() as a pure call: all search state is
created inside the call and dropped when it returns.
"""

from __future__ import annotations

import threading
import time
from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass, field

from gridroute.config import GRID_SIZE
from gridroute.errors import SearchBudgetExceeded
from gridroute.grid.model import Cell, CellLike


@dataclass
class SearchResult:
    """
    Outcome of a single search.

    Attributes:
        strategy: Name of the strategy that ran
        path: Cells from start to end, empty if the end is unreachable
        expansions: Number of cells expanded
        elapsed_ms: Wall-clock search time (milliseconds)
    """

    strategy: str
    path: list[Cell] = field(default_factory=list)
    expansions: int = 0
    elapsed_ms: float = 0.0

    @property
    def found(self) -> bool:
        return bool(self.path)

    @property
    def length(self) -> int | None:
        """Number of edges in the path, or None if no path was found."""
        if not self.path:
            return None
        return len(self.path) - 1


@dataclass
class SearchBudget:
    """
    Limits for a single exhaustive search.

    A limit of None disables it. The clock starts when start() is called
    at the beginning of the search. find_shortest_path_exhaustive() starts
    a copy, never the object it was given.

    Attributes:
        max_expansions: Give up after this many expansions
        timeout_s: Give up after this many seconds
        cancel_event: Give up as soon as this event is set
    """

    max_expansions: int | None = None
    timeout_s: float | None = None
    cancel_event: threading.Event | None = None
    _started_at: float = field(default=0.0, init=False, repr=False)

    def start(self) -> None:
        self._started_at = time.monotonic()

    @property
    def elapsed_ms(self) -> float:
        return (time.monotonic() - self._started_at) * 1000

    def check(self, expansions: int, best_path: list[Cell] | None = None) -> None:
        """
        Raise if any limit has been reached.

        Raises:
            SearchBudgetExceeded: With the counters and best path so far
        """
        reason = None
        if self.max_expansions is not None and expansions > self.max_expansions:
            reason = f"expansion limit of {self.max_expansions:,} reached"
        elif self.timeout_s is not None and time.monotonic() - self._started_at > self.timeout_s:
            reason = f"time limit of {self.timeout_s}s reached"
        elif self.cancel_event is not None and self.cancel_event.is_set():
            reason = "search cancelled"

        if reason is not None:
            raise SearchBudgetExceeded(
                f"Search gave up: {reason}",
                expansions=expansions,
                elapsed_ms=self.elapsed_ms,
                best_path=list(best_path) if best_path else None,
            )


class SearchStrategy(ABC):
    """
    Abstract base class for path search strategies.

    Strategies are stateless between calls and safe to share across threads.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Short identifier used in routes and on the command line."""
        ...

    @property
    @abstractmethod
    def description(self) -> str:
        """Human-readable description of the strategy."""
        ...

    @abstractmethod
    def find_path(
        self,
        start: CellLike,
        end: CellLike,
        obstacles: Iterable[CellLike] | None = None,
        grid_size: int = GRID_SIZE,
    ) -> SearchResult:
        """
        Find a shortest path from start to end.

        Args:
            start: Start cell
            end: End cell
            obstacles: Blocked cells
            grid_size: Width and height of the grid

        Returns:
            SearchResult, with an empty path when end is unreachable

        Raises:
            InvalidCellError: If start or end is out of bounds or blocked
        """
        ...

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r})"
