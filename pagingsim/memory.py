"""Virtual memory, page table and physical memory of a single process."""

from __future__ import annotations

import random
from dataclasses import dataclass

PAGE_LEN = 4
VIRTUAL_BLOCKS = 20
FRAME_LEN = 4
PHYSICAL_BLOCKS = 20
UNIT_BYTES = 512
EMPTY = -1


def _trunc_div(numerator: int, denominator: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(numerator) // denominator
    return quotient if numerator >= 0 else -quotient


class VirtualMemory:
    """Fixed grid of virtual blocks, each holding PAGE_LEN page numbers."""

    def __init__(self, process_size: int) -> None:
        self.process_size = process_size
        self.blocks: list[list[int]] = [
            [EMPTY] * PAGE_LEN for _ in range(VIRTUAL_BLOCKS)
        ]
        self.no_pages = _trunc_div(process_size + PAGE_LEN - 1, PAGE_LEN)
        self._allocate()

    def _allocate(self) -> None:
        # A process that does not fit leaves the memory untouched.
        if self.no_pages > VIRTUAL_BLOCKS:
            return
        for page in range(max(self.no_pages, 0)):
            block, slot = divmod(page, PAGE_LEN)
            self.blocks[block][slot] = page

    def render(self) -> str:
        """Return a text dump of every virtual block."""
        lines = []
        for index, block in enumerate(self.blocks):
            lines.append(f"Block {index}")
            lines.append("".join(f"{value} " for value in block))
        return "\n".join(lines) + "\n"

    def internal_fragmentation(self) -> int:
        """Unused slots in the first ``no_pages`` blocks, in bytes."""
        unused = sum(block.count(EMPTY) for block in self.blocks[: max(self.no_pages, 0)])
        return unused * UNIT_BYTES


@dataclass(frozen=True)
class PageTableEntry:
    """Mapping of one virtual block to a physical block."""

    vm_block_index: int
    pm_block_index: int
    valid: bool


class PageTable:
    """Ordered list of entries mapping virtual blocks to physical blocks."""

    def __init__(self, physical_memory_size: int = 0) -> None:
        self.physical_memory_size = physical_memory_size
        self.entries: list[PageTableEntry] = []

    def build(self, vm: VirtualMemory) -> None:
        """Map every page of ``vm``; does nothing if physical memory is too small."""
        no_blocks = vm.no_pages
        if no_blocks > self.physical_memory_size:
            return
        for index in range(no_blocks):
            self.entries.append(
                PageTableEntry(index, index % self.physical_memory_size, True)
            )

    def copy(self) -> PageTable:
        duplicate = PageTable(self.physical_memory_size)
        duplicate.entries = list(self.entries)
        return duplicate

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self):
        return iter(self.entries)


class PhysicalMemory:
    """Physical frames filled from virtual memory through a page table."""

    def __init__(self, page_table: PageTable | None = None) -> None:
        self._table = page_table.copy() if page_table is not None else PageTable()
        self._frames: list[list[int] | None] = [None] * PHYSICAL_BLOCKS

    def allocate(self, vm: VirtualMemory) -> None:
        """Copy each mapped virtual block into its physical frame."""
        for entry in self._table.entries:
            if 0 <= entry.pm_block_index < PHYSICAL_BLOCKS:
                source = vm.blocks[entry.vm_block_index]
                self._frames[entry.pm_block_index] = list(source[:FRAME_LEN])

    @property
    def page_table_size(self) -> int:
        return len(self._table)

    @property
    def page_table(self) -> PageTable:
        return self._table.copy()

    @property
    def frames(self) -> list[list[int] | None]:
        return [None if frame is None else list(frame) for frame in self._frames]

    def render(self) -> str:
        """Return a text dump of every physical block."""
        lines = []
        for index, frame in enumerate(self._frames):
            body = "Empty" if frame is None else "".join(f"{value} " for value in frame)
            lines.append(f"Physical Memory Block {index}: {body}")
        return "\n".join(lines) + "\n"


def random_location(size: int, rng: random.Random | None = None) -> int:
    """Uniform value in ``[0, size]``, stored as a signed byte."""
    rng = rng or random.Random()
    value = rng.randint(0, size)
    return (value + 128) % 256 - 128


def generate_reference_string(
    length: int, max_page: int, rng: random.Random | None = None
) -> list[int]:
    """Random page references, each in ``[0, max_page]``."""
    rng = rng or random.Random()
    return [random_location(max_page, rng) for _ in range(length)]