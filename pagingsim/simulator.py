"""Step-by-step simulation of one process: memory layout and page replacement."""

from __future__ import annotations

import argparse
import random
import time
from collections.abc import Sequence

from pagingsim.memory import (
    PAGE_LEN,
    VIRTUAL_BLOCKS,
    PageTable,
    PhysicalMemory,
    VirtualMemory,
    generate_reference_string,
)
from pagingsim.replacement import EMPTY_FRAME, PageReplacement

EMPTY_CELL = "Empty"
DEFAULT_PROCESS_SIZE = 35
DEFAULT_REFERENCE_LENGTH = 20
DEFAULT_TABLE_SIZE = 4
DEFAULT_INTERVAL = 2.0
_BAR_WIDTH = 40


class Simulation:
    """A process laid out in memory plus a replacement run over random references."""

    def __init__(
        self,
        process_size: int = DEFAULT_PROCESS_SIZE,
        reference_length: int = DEFAULT_REFERENCE_LENGTH,
        table_size: int = DEFAULT_TABLE_SIZE,
        rng: random.Random | None = None,
    ) -> None:
        if process_size < 0:
            raise ValueError("process size cannot be negative")
        if process_size > VIRTUAL_BLOCKS * PAGE_LEN:
            raise ValueError("not enough virtual memory to accommodate the process")
        if reference_length < 0:
            raise ValueError("reference length cannot be negative")
        self.process_size = process_size
        self.vm = VirtualMemory(process_size)
        table = PageTable(process_size)
        table.build(self.vm)
        self.physical_memory = PhysicalMemory(table)
        self.physical_memory.allocate(self.vm)
        reference = generate_reference_string(
            reference_length, self.physical_memory.page_table_size, rng
        )
        self.replacement = PageReplacement(reference, table_size)
        self.finished = False

    def page_table_rows(self) -> list[tuple[str, str, str]]:
        """One row per page table entry: validity, virtual block, physical block."""
        return [
            (
                "Valid" if entry.valid else "Invalid",
                f"VM Block: {entry.vm_block_index}",
                f"PM Block: {entry.pm_block_index}",
            )
            for entry in self.physical_memory.page_table
        ]

    def physical_memory_rows(self) -> list[list[str]]:
        """Cell texts for every physical frame; unused frames read 'Empty'."""
        return [
            [EMPTY_CELL] * PAGE_LEN if frame is None else [str(v) for v in frame]
            for frame in self.physical_memory.frames
        ]

    @property
    def replacement_rows(self) -> list[str]:
        """Cell texts of the replacement frames."""
        return [
            EMPTY_CELL if page == EMPTY_FRAME else str(page)
            for page in self.replacement.frames
        ]

    def tick(self) -> bool:
        """Serve one reference; once none remain, mark the run finished and return False."""
        if self.finished:
            return False
        if self.replacement.step():
            return True
        self.finished = True
        return False

    def progress(self) -> int:
        """Percentage of the reference string served so far."""
        initial = self.replacement.initial_size
        if initial == 0:
            return 100
        completed = initial - self.replacement.remaining
        return completed * 100 // initial

    @property
    def completion_message(self) -> str:
        return f"Process completed with {self.replacement.page_faults} page faults"

    def render(self) -> str:
        """Text view of the whole simulation state."""
        lines = ["Process Details", "", "Page Table"]
        lines.extend(" | ".join(row) for row in self.page_table_rows())
        lines.extend(["", "Physical Memory"])
        lines.extend(
            " | ".join(row) for row in self.physical_memory_rows()
        )
        lines.extend(
            ["", "Reference String", self.replacement.reference_text(), "",
             "Page Replacement Table"]
        )
        lines.extend(self.replacement_rows)
        percent = self.progress()
        filled = percent * _BAR_WIDTH // 100
        bar = "#" * filled + "-" * (_BAR_WIDTH - filled)
        lines.extend(["", f"Process Completion Bar [{bar}] {percent}%"])
        return "\n".join(lines) + "\n"


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="pagingsim", description="Simulate paging and page replacement."
    )
    parser.add_argument("--process-size", type=int, default=DEFAULT_PROCESS_SIZE)
    parser.add_argument("--length", type=int, default=DEFAULT_REFERENCE_LENGTH)
    parser.add_argument("--frames", type=int, default=DEFAULT_TABLE_SIZE)
    parser.add_argument("--interval", type=float, default=DEFAULT_INTERVAL,
                        help="seconds between steps")
    parser.add_argument("--seed", type=int, default=None)
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the simulation in the terminal, one step per interval."""
    args = _parse_args(argv)
    rng = random.Random(args.seed)
    try:
        sim = Simulation(args.process_size, args.length, args.frames, rng)
    except ValueError as exc:
        print(f"error: {exc}")
        return 2
    print(sim.render())
    while sim.tick():
        if args.interval > 0:
            time.sleep(args.interval)
        print(sim.render())
    print(sim.completion_message)
    return 0