"""Memory mappings of a region of an open file."""

from __future__ import annotations

import mmap
from enum import Enum


class MapAdvice(Enum):
    """Access-pattern hints for a mapping."""

    NORMAL = "MADV_NORMAL"
    RANDOM = "MADV_RANDOM"
    SEQUENTIAL = "MADV_SEQUENTIAL"
    WILLNEED = "MADV_WILLNEED"
    DONTNEED = "MADV_DONTNEED"


class FileMap:
    """A mapped region of a file; the file descriptor stays owned by the caller."""

    def __init__(
        self,
        file_name: str | None,
        mapping: mmap.mmap,
        data_offset: int,
        delta: int,
        length: int,
    ) -> None:
        self._file_name = file_name
        self._mmap = mapping
        self._data_offset = data_offset
        self._view: memoryview | None = memoryview(mapping)[delta:delta + length]

    @classmethod
    def create(
        cls,
        file_name: str | None,
        fd: int,
        offset: int,
        length: int,
        read_only: bool = True,
    ) -> FileMap:
        """Map ``length`` bytes of ``fd`` starting at ``offset``.

        Raises ``ValueError`` for a bad region and ``OSError`` if mapping fails.
        """
        if offset < 0:
            raise ValueError(f"offset must not be negative, got {offset}")
        if length <= 0:
            raise ValueError(f"length must be positive, got {length}")
        base = offset - offset % mmap.ALLOCATIONGRANULARITY
        delta = offset - base
        access = mmap.ACCESS_READ if read_only else mmap.ACCESS_WRITE
        mapping = mmap.mmap(fd, delta + length, access=access, offset=base)
        return cls(file_name, mapping, offset, delta, length)

    @property
    def file_name(self) -> str | None:
        """The name of the mapped file, if known."""
        return self._file_name

    @property
    def data_offset(self) -> int:
        """The file offset the mapping was created with."""
        return self._data_offset

    @property
    def data_length(self) -> int:
        """The length that was requested."""
        return len(self.data())

    @property
    def closed(self) -> bool:
        return self._view is None

    def data(self) -> memoryview:
        """The requested bytes of the file."""
        if self._view is None:
            raise ValueError("file map is closed")
        return self._view

    def advise(self, advice: MapAdvice) -> None:
        """Give the system a hint about how the whole mapping will be read."""
        if self._view is None:
            raise ValueError("file map is closed")
        flag = getattr(mmap, advice.value, None)
        if flag is None or not hasattr(self._mmap, "madvise"):
            raise OSError(f"{advice.name} advice is not supported on this platform")
        self._mmap.madvise(flag)

    def close(self) -> None:
        """Unmap the region; further access raises ``ValueError``."""
        if self._view is not None:
            self._view.release()
            self._view = None
            self._mmap.close()

    def __enter__(self) -> FileMap:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()