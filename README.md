# pagingsim

A small simulator for teaching how a process is laid out in paged memory and
how a page-replacement policy handles a stream of page references.

It models:

- a virtual memory of 20 blocks with 4 pages each, filled for a process of a
  given size (`pagingsim.memory.VirtualMemory`);
- a page table that maps virtual blocks onto physical frames
  (`PageTable`, made of `PageTableEntry` records);
- a physical memory of 20 frames loaded through that page table
  (`PhysicalMemory`);
- a page-replacement run over a reference string, which picks its victim by
  looking ahead at the references still to come and counts page faults
  (`pagingsim.replacement.PageReplacement`).

## Installing

```
pip install .
```

## Running the simulation

```
pagingsim
```

This lays out a process in memory, makes a random reference string, and then
serves one reference per step. It prints the whole state first and again after
every step: the page table, the physical memory frames, the reference string,
the page-replacement table and a completion bar. When every reference has been
served it prints the number of page faults.

Options:

- `--process-size N`: size of the process (default 35). Sizes above 80, which
  do not fit in virtual memory, and negative sizes are rejected with an error
  message and exit status 2.
- `--length N`: length of the reference string (default 20).
- `--frames N`: number of frames in the page-replacement table (default 4).
- `--interval SECONDS`: pause between steps (default 2.0; 0 for no pause).
- `--seed N`: seed for the random reference string, for repeatable runs.

Run `pagingsim --help` to see them listed.

## Using it as a library

```python
import random

from pagingsim.memory import VirtualMemory, PageTable, PhysicalMemory, generate_reference_string
from pagingsim.replacement import PageReplacement
from pagingsim.simulator import Simulation

vm = VirtualMemory(35)
print(vm.internal_fragmentation())   # unused slots in bytes, 512 per slot

table = PageTable(35)
table.build(vm)
pm = PhysicalMemory(table)
pm.allocate(vm)
print(pm.render())

refs = generate_reference_string(10, pm.page_table_size, random.Random(1))

pr = PageReplacement([1, 2, 3, 4, 1, 5, 2], 4)
faults = pr.run()
print(faults, pr.frames)

sim = Simulation(35, 20, 4, random.Random(7))
while sim.tick():
    print(sim.progress())
print(sim.render())
print(sim.completion_message)
```

`PageReplacement.step()` serves a single reference and returns `False` once
the reference string is used up; empty frames hold `-1`.
`DigitPageReplacement` runs the same kind of policy over a text string, taking
only its digit characters as page references; its empty frames hold `None`.

`Simulation` also offers `page_table_rows()`, `physical_memory_rows()` and
`replacement_rows` for the cell texts of each table.

## What it does not do

The simulation runs in the terminal only: it prints text views of the tables
and a text progress bar. There is no graphical window and no pop-up dialog.

## Running the tests

```
pip install ".[test]"
pytest
```