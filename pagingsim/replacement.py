"""Page replacement that evicts by looking ahead in the reference string."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence
from itertools import islice
from typing import Generic, TypeVar

EMPTY_FRAME = -1

P = TypeVar("P")


class _ReplacementBase(Generic[P]):
    def __init__(self, reference: Iterable[P], table_size: int, empty) -> None:
        if table_size < 1:
            raise ValueError("page table needs at least one frame")
        self.reference: tuple[P, ...] = tuple(reference)
        self.table_size = table_size
        self.page_faults = 0
        self.page_names: list[P] = list(dict.fromkeys(self.reference))
        self._empty = empty
        self._frames: list = [empty] * table_size
        self._remaining: deque[P] = deque(self.reference)

    @property
    def frames(self) -> list:
        return list(self._frames)

    @property
    def remaining(self) -> int:
        return len(self._remaining)

    @property
    def initial_size(self) -> int:
        return len(self.reference)

    def _choose_victim(self) -> P:
        raise NotImplementedError

    def _advance(self) -> bool:
        if not self._remaining:
            return False
        current = self._remaining[0]
        if current in self._frames:
            self._remaining.popleft()
            return True
        if self._empty in self._frames:
            slot = self._frames.index(self._empty)
        else:
            slot = self._frames.index(self._choose_victim())
        self._frames[slot] = current
        self._remaining.popleft()
        self.page_faults += 1
        return True

    def _finish(self) -> int:
        while self._advance():
            pass
        return self.page_faults


class PageReplacement(_ReplacementBase[int]):
    """Replacement over integer page numbers; empty frames hold -1."""

    def __init__(self, reference: Sequence[int], table_size: int) -> None:
        super().__init__(reference, table_size, EMPTY_FRAME)

    def _choose_victim(self) -> int:
        limit = self.table_size - 1
        upcoming: list[int] = []
        later = islice(reversed(self._remaining), len(self._remaining) - 1)
        for page in later:
            if len(upcoming) == limit:
                break
            if page in self._frames:
                upcoming.append(page)
        if len(upcoming) == len(self.page_names):
            candidates = upcoming
        else:
            candidates = [p for p in self.page_names if p not in upcoming]
        for page in candidates:
            if page in self._frames:
                return page
        raise LookupError("no frame can be evicted")

    def step(self) -> bool:
        """Serve the next reference; False once the reference string is used up."""
        return self._advance()

    def run(self) -> int:
        """Serve every remaining reference and return the fault count."""
        return self._finish()

    def reference_text(self) -> str:
        return "".join(str(page) for page in self.reference)


class DigitPageReplacement(_ReplacementBase[str]):
    """Replacement over the digits of a text; empty frames hold None."""

    def __init__(self, text: str, table_size: int) -> None:
        self.text = text
        super().__init__((ch for ch in text if ch.isdigit()), table_size, None)

    def _choose_victim(self) -> str:
        seen: list[str] = []
        for page in reversed(self._remaining):
            if len(seen) == len(self.page_names):
                break
            if page not in seen:
                seen.append(page)
        if len(seen) == len(self.page_names):
            candidates = seen
        else:
            candidates = [p for p in self.page_names if p not in seen]
        for page in reversed(candidates):
            if page in self._frames:
                return page
        raise LookupError("no frame can be evicted")

    def step(self) -> bool:
        """Serve the next digit; False once the text is used up."""
        return self._advance()

    def run(self) -> int:
        """Serve every remaining digit and return the fault count."""
        return self._finish()