"""Memory allocators, a tracking memory resource and an allocation counter."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar

MAX_ALIGN = 16
"""Alignment used by memory resources when none is given."""


class AllocatorError(Exception):
    """Raised when an allocator is used in a way it does not support."""


@dataclass(frozen=True, eq=False)
class Block:
    """A block of memory handed out by an allocator."""

    address: int
    data: memoryview

    @property
    def size(self) -> int:
        return len(self.data)


def _check_size(size: int) -> None:
    if size < 0:
        raise ValueError(f"allocation size must not be negative: {size}")


def calculate_padding(base_address: int, alignment: int) -> int:
    """Bytes to add to ``base_address`` to reach the next multiple of ``alignment``.

    An address that is already aligned is moved on by a whole ``alignment``.
    """
    if alignment <= 0:
        raise ValueError(f"alignment must be positive: {alignment}")
    multiplier = base_address // alignment + 1
    return multiplier * alignment - base_address


class Allocator(ABC):
    """Base of allocators that hand out blocks from some pool of memory."""

    def __init__(self, total_size: int) -> None:
        self.total_size = total_size
        self.used_memory = 0
        self.num_allocations = 0
        self.peak = 0

    @abstractmethod
    def allocate(self, size: int, alignment: int = 0) -> Block:
        """Hand out a block of ``size`` bytes."""

    @abstractmethod
    def free(self, block: Block) -> None:
        """Give a block back."""

    @abstractmethod
    def init(self) -> None:
        """Prepare the allocator's memory."""


class CAllocator(Allocator):
    """Allocates every block separately; alignment is ignored."""

    def __init__(self) -> None:
        super().__init__(0)

    def init(self) -> None:
        """Nothing needs preparing."""

    def allocate(self, size: int, alignment: int = 0) -> Block:
        _check_size(size)
        buffer = bytearray(size)
        return Block(id(buffer), memoryview(buffer))

    def free(self, block: Block) -> None:
        block.data.release()


class LinearAllocator(Allocator):
    """Hands out consecutive blocks of one arena; memory is released only by reset()."""

    def __init__(self, total_size: int) -> None:
        super().__init__(total_size)
        self._arena: memoryview | None = None
        self.offset = 0

    def init(self) -> None:
        """Create a fresh arena and start handing out from its beginning."""
        self._arena = memoryview(bytearray(self.total_size))
        self.offset = 0

    def allocate(self, size: int, alignment: int = 0) -> Block:
        """The next ``size`` bytes of the arena, aligned when ``alignment`` is set.

        Raises MemoryError when the arena has no room left.
        """
        if self._arena is None:
            raise AllocatorError("init() must be called before allocating")
        _check_size(size)
        if alignment < 0:
            raise ValueError(f"alignment must not be negative: {alignment}")

        padding = 0
        if alignment and self.offset % alignment:
            padding = calculate_padding(self.offset, alignment)
        if self.offset + padding + size > self.total_size:
            raise MemoryError(
                f"linear allocator of {self.total_size} bytes cannot fit {size} more"
            )

        address = self.offset + padding
        self.offset = address + size
        self.used_memory = self.offset
        self.peak = max(self.peak, self.used_memory)
        return Block(address, self._arena[address : self.offset])

    def free(self, block: Block) -> None:
        raise AllocatorError("a linear allocator releases its memory with reset()")

    def reset(self) -> None:
        """Release every block at once."""
        self.offset = 0
        self.used_memory = 0
        self.peak = 0


class MemoryResource(ABC):
    """A source of memory blocks that are given back with their size and alignment."""

    @abstractmethod
    def allocate(self, size: int, alignment: int = MAX_ALIGN) -> Block:
        """Hand out a block of ``size`` bytes."""

    @abstractmethod
    def deallocate(self, block: Block, size: int, alignment: int = MAX_ALIGN) -> None:
        """Give back a block handed out by ``allocate``."""


class DefaultResource(MemoryResource):
    """Allocates each block on its own."""

    def allocate(self, size: int, alignment: int = MAX_ALIGN) -> Block:
        _check_size(size)
        buffer = bytearray(size)
        return Block(id(buffer), memoryview(buffer))

    def deallocate(self, block: Block, size: int, alignment: int = MAX_ALIGN) -> None:
        block.data.release()


_DEFAULT_RESOURCE = DefaultResource()


@dataclass(frozen=True)
class _AllocationRecord:
    block: Block
    size: int
    alignment: int


class TrackingResource(MemoryResource):
    """Passes requests to a parent resource and keeps account of them.

    Blocks still held when the resource is closed are given back to the
    parent and counted as leaked in ``leaked_bytes`` and ``leaked_blocks``.
    """

    leaked_bytes: ClassVar[int] = 0
    leaked_blocks: ClassVar[int] = 0

    def __init__(self, parent: MemoryResource | None = None) -> None:
        self.parent = parent if parent is not None else _DEFAULT_RESOURCE
        self.bytes_allocated = 0
        self.bytes_outstanding = 0
        self.bytes_highwater = 0
        self._records: list[_AllocationRecord] = []

    @property
    def bytes_deallocated(self) -> int:
        return self.bytes_allocated - self.bytes_outstanding

    @property
    def blocks_outstanding(self) -> int:
        return len(self._records)

    def allocate(self, size: int, alignment: int = MAX_ALIGN) -> Block:
        block = self.parent.allocate(size, alignment)
        self._records.append(_AllocationRecord(block, size, alignment))
        self.bytes_allocated += size
        self.bytes_outstanding += size
        self.bytes_highwater = max(self.bytes_highwater, self.bytes_outstanding)
        return block

    def deallocate(self, block: Block, size: int, alignment: int = MAX_ALIGN) -> None:
        """Give a block back; the size and alignment must match its allocation."""
        position = next(
            (i for i, record in enumerate(self._records) if record.block is block),
            None,
        )
        if position is None:
            raise ValueError("deallocate: invalid block")
        record = self._records[position]
        if record.size != size:
            raise ValueError("deallocate: size mismatch")
        if record.alignment != alignment:
            raise ValueError("deallocate: alignment mismatch")

        self.parent.deallocate(block, record.size, record.alignment)
        del self._records[position]
        self.bytes_outstanding -= size

    def close(self) -> None:
        """Give every outstanding block back to the parent, counting it as leaked."""
        TrackingResource.leaked_blocks += len(self._records)
        for record in self._records:
            TrackingResource.leaked_bytes += record.size
            self.parent.deallocate(record.block, record.size, record.alignment)
        self._records.clear()

    def __enter__(self) -> TrackingResource:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    @staticmethod
    def clear_leaked() -> None:
        """Reset the leak counters."""
        TrackingResource.leaked_bytes = 0
        TrackingResource.leaked_blocks = 0


class AllocationTracker:
    """Counts allocations and frees, optionally printing each one."""

    def __init__(self, trace: bool = False) -> None:
        self.trace = trace
        self.total_alloc_calls = 0
        self.new_alloc_calls = 0
        self.total_free_calls = 0
        self.new_dealloc_calls = 0
        self.bytes_allocated = 0
        self.bytes_freed = 0

    @property
    def memory_usage(self) -> int:
        return self.bytes_allocated - self.bytes_freed

    def allocate(self, size: int) -> bytearray:
        """Record and perform an allocation of ``size`` bytes."""
        _check_size(size)
        self.total_alloc_calls += 1
        self.new_alloc_calls += 1
        self.bytes_allocated += size
        if self.trace:
            print(f"Allocating {size} bytes", file=sys.stdout)
        return bytearray(size)

    def deallocate(self, size: int) -> None:
        """Record the release of ``size`` bytes."""
        self.total_free_calls += 1
        self.new_dealloc_calls += 1
        self.bytes_freed += size
        if self.trace:
            print(f"Deallocating {size} bytes", file=sys.stdout)

    def status(self) -> str:
        """Print and return the current counts, then reset the per-status counts."""
        line = (
            f"Memory usage: {self.memory_usage} bytes"
            f" | Count new: {self.new_alloc_calls}"
            f" | Count Free: {self.new_dealloc_calls}"
            f" | Total new: {self.total_alloc_calls}"
            f" | Total delete: {self.total_free_calls}"
        )
        print(line, file=sys.stdout)
        self.new_alloc_calls = 0
        self.new_dealloc_calls = 0
        return line