import random

import pytest

from pagingsim.memory import (
    EMPTY,
    PHYSICAL_BLOCKS,
    VIRTUAL_BLOCKS,
    PageTable,
    PhysicalMemory,
    VirtualMemory,
    generate_reference_string,
    random_location,
)


def _loaded(size):
    vm = VirtualMemory(size)
    pt = PageTable(35)
    pt.build(vm)
    pm = PhysicalMemory(pt)
    pm.allocate(vm)
    return vm, pt, pm


@pytest.mark.parametrize("size", [0, 1, 4, 5, 35, 80])
def test_pages_numbered_sequentially(size):
    vm = VirtualMemory(size)
    used = [v for block in vm.blocks for v in block if v != EMPTY]
    assert used == list(range(vm.no_pages))


def test_page_count_for_default_process():
    assert VirtualMemory(35).no_pages == 9


def test_oversized_process_leaves_memory_empty():
    vm = VirtualMemory(100)
    assert vm.no_pages > VIRTUAL_BLOCKS
    assert all(v == EMPTY for block in vm.blocks for v in block)


def test_fragmentation_of_single_page():
    assert VirtualMemory(4).internal_fragmentation() == 1536


@pytest.mark.parametrize("size", [1, 7, 35, 64])
def test_fragmentation_is_multiple_of_unit(size):
    assert VirtualMemory(size).internal_fragmentation() % 512 == 0


def test_virtual_render_lists_every_block():
    lines = VirtualMemory(35).render().splitlines()
    assert len(lines) == 2 * VIRTUAL_BLOCKS
    assert lines[0] == "Block 0"


def test_page_table_maps_each_page():
    vm, pt, _ = _loaded(35)
    assert [e.vm_block_index for e in pt.entries] == list(range(vm.no_pages))
    assert all(e.valid for e in pt.entries)
    assert all(e.pm_block_index == e.vm_block_index for e in pt.entries)


def test_page_table_skipped_when_memory_too_small():
    pt = PageTable(2)
    pt.build(VirtualMemory(35))
    assert pt.entries == []


def test_physical_memory_copies_mapped_blocks():
    vm, pt, pm = _loaded(35)
    frames = pm.frames
    assert pm.page_table_size == len(pt.entries)
    for entry in pt.entries:
        assert frames[entry.pm_block_index] == vm.blocks[entry.vm_block_index]
    assert all(frame is None for frame in frames[pm.page_table_size:])


def test_physical_memory_owns_its_table_copy():
    vm = VirtualMemory(35)
    pt = PageTable(35)
    pt.build(vm)
    pm = PhysicalMemory(pt)
    pt.entries.clear()
    assert pm.page_table_size == vm.no_pages


def test_physical_render_marks_empty_frames():
    _, _, pm = _loaded(35)
    lines = pm.render().splitlines()
    assert len(lines) == PHYSICAL_BLOCKS
    assert sum(line.endswith("Empty") for line in lines) == PHYSICAL_BLOCKS - pm.page_table_size


def test_reference_string_in_range():
    refs = generate_reference_string(20, 9, random.Random(1))
    assert len(refs) == 20
    assert all(0 <= r <= 9 for r in refs)


def test_reference_string_reproducible_with_seed():
    first = generate_reference_string(20, 9, random.Random(7))
    second = generate_reference_string(20, 9, random.Random(7))
    assert first == second


def test_random_location_bounds():
    rng = random.Random(3)
    values = {random_location(5, rng) for _ in range(200)}
    assert values <= set(range(6))