"""Zip archive entries: local file headers, central directory entries and
the pairing of the two that describes one file in an archive."""

from __future__ import annotations

import dataclasses
import logging
import struct
import time
from dataclasses import dataclass, field
from typing import BinaryIO

logger = logging.getLogger(__name__)

COMPRESS_STORED = 0
COMPRESS_DEFLATED = 8

USES_DATA_DESCR = 0x0008
MAX_COMPRESSION_FLAG = 0x0002

DEFAULT_VERSION = 20
DEFAULT_MADE_BY = 0x0317
DEFAULT_EXTERNAL_ATTRS = 0x81B60020

LFH_SIGNATURE = 0x04034B50
CDE_SIGNATURE = 0x02014B50

_LFH_STRUCT = struct.Struct("<IHHHHHIIIHH")
_CDE_STRUCT = struct.Struct("<IHHHHHHIIIHHHHHII")

LFH_LEN = _LFH_STRUCT.size
CDE_LEN = _CDE_STRUCT.size


class ZipFormatError(Exception):
    """Raised when an archive structure cannot be read."""


def _read_exact(fp: BinaryIO, size: int, what: str) -> bytes:
    data = fp.read(size)
    if len(data) != size:
        raise ZipFormatError(f"short read of {what}: wanted {size}, got {len(data)}")
    return data


def _as_bytes(value: str | bytes) -> bytes:
    return value.encode("utf-8") if isinstance(value, str) else bytes(value)


@dataclass
class LocalFileHeader:
    """The header that precedes each file's data in an archive."""

    version_to_extract: int = 0
    gp_bit_flag: int = 0
    compression_method: int = 0
    last_mod_file_time: int = 0
    last_mod_file_date: int = 0
    crc32: int = 0
    compressed_size: int = 0
    uncompressed_size: int = 0
    file_name: bytes = b""
    extra_field: bytes = b""

    @property
    def file_name_length(self) -> int:
        return len(self.file_name)

    @property
    def extra_field_length(self) -> int:
        return len(self.extra_field)

    @classmethod
    def read(cls, fp: BinaryIO) -> LocalFileHeader:
        """Read a header positioned at its signature; leaves ``fp`` at the data."""
        (
            signature,
            version_to_extract,
            gp_bit_flag,
            compression_method,
            mod_time,
            mod_date,
            crc32,
            compressed_size,
            uncompressed_size,
            name_len,
            extra_len,
        ) = _LFH_STRUCT.unpack(_read_exact(fp, LFH_LEN, "local file header"))
        if signature != LFH_SIGNATURE:
            raise ZipFormatError(
                f"local file header signature mismatch: 0x{signature:08x}"
            )
        file_name = _read_exact(fp, name_len, "file name") if name_len else b""
        extra = _read_exact(fp, extra_len, "extra field") if extra_len else b""
        return cls(
            version_to_extract=version_to_extract,
            gp_bit_flag=gp_bit_flag,
            compression_method=compression_method,
            last_mod_file_time=mod_time,
            last_mod_file_date=mod_date,
            crc32=crc32,
            compressed_size=compressed_size,
            uncompressed_size=uncompressed_size,
            file_name=file_name,
            extra_field=extra,
        )

    def write(self, fp: BinaryIO) -> None:
        """Write the header, file name and extra field."""
        fp.write(
            _LFH_STRUCT.pack(
                LFH_SIGNATURE,
                self.version_to_extract,
                self.gp_bit_flag,
                self.compression_method,
                self.last_mod_file_time,
                self.last_mod_file_date,
                self.crc32,
                self.compressed_size,
                self.uncompressed_size,
                self.file_name_length,
                self.extra_field_length,
            )
            + self.file_name
            + self.extra_field
        )

    def describe(self) -> str:
        """A readable multi-line summary of the header."""
        lines = [
            " LocalFileHeader contents:",
            f"  versToExt={self.version_to_extract} gpBits=0x{self.gp_bit_flag:04x}"
            f" compression={self.compression_method}",
            f"  modTime=0x{self.last_mod_file_time:04x}"
            f" modDate=0x{self.last_mod_file_date:04x} crc32=0x{self.crc32:08x}",
            f"  compressedSize={self.compressed_size}"
            f" uncompressedSize={self.uncompressed_size}",
            f"  filenameLen={self.file_name_length} extraLen={self.extra_field_length}",
        ]
        if self.file_name:
            lines.append(f"  filename: '{self.file_name.decode('utf-8', 'replace')}'")
        return "\n".join(lines)


@dataclass
class CentralDirEntry:
    """One record of an archive's central directory."""

    version_made_by: int = 0
    version_to_extract: int = 0
    gp_bit_flag: int = 0
    compression_method: int = 0
    last_mod_file_time: int = 0
    last_mod_file_date: int = 0
    crc32: int = 0
    compressed_size: int = 0
    uncompressed_size: int = 0
    file_name: bytes = b""
    extra_field: bytes = b""
    file_comment: bytes = b""
    disk_number_start: int = 0
    internal_attrs: int = 0
    external_attrs: int = 0
    local_header_rel_offset: int = 0

    @property
    def file_name_length(self) -> int:
        return len(self.file_name)

    @property
    def extra_field_length(self) -> int:
        return len(self.extra_field)

    @property
    def file_comment_length(self) -> int:
        return len(self.file_comment)

    @classmethod
    def read(cls, fp: BinaryIO) -> CentralDirEntry:
        """Read an entry positioned at its signature; leaves ``fp`` after it."""
        (
            signature,
            version_made_by,
            version_to_extract,
            gp_bit_flag,
            compression_method,
            mod_time,
            mod_date,
            crc32,
            compressed_size,
            uncompressed_size,
            name_len,
            extra_len,
            comment_len,
            disk_number_start,
            internal_attrs,
            external_attrs,
            local_header_rel_offset,
        ) = _CDE_STRUCT.unpack(_read_exact(fp, CDE_LEN, "central directory entry"))
        if signature != CDE_SIGNATURE:
            raise ZipFormatError(
                f"central directory signature mismatch: 0x{signature:08x}"
            )
        file_name = _read_exact(fp, name_len, "file name") if name_len else b""
        extra = _read_exact(fp, extra_len, "extra field") if extra_len else b""
        comment = _read_exact(fp, comment_len, "file comment") if comment_len else b""
        return cls(
            version_made_by=version_made_by,
            version_to_extract=version_to_extract,
            gp_bit_flag=gp_bit_flag,
            compression_method=compression_method,
            last_mod_file_time=mod_time,
            last_mod_file_date=mod_date,
            crc32=crc32,
            compressed_size=compressed_size,
            uncompressed_size=uncompressed_size,
            file_name=file_name,
            extra_field=extra,
            file_comment=comment,
            disk_number_start=disk_number_start,
            internal_attrs=internal_attrs,
            external_attrs=external_attrs,
            local_header_rel_offset=local_header_rel_offset,
        )

    def write(self, fp: BinaryIO) -> None:
        """Write the entry, file name, extra field and comment."""
        fp.write(
            _CDE_STRUCT.pack(
                CDE_SIGNATURE,
                self.version_made_by,
                self.version_to_extract,
                self.gp_bit_flag,
                self.compression_method,
                self.last_mod_file_time,
                self.last_mod_file_date,
                self.crc32,
                self.compressed_size,
                self.uncompressed_size,
                self.file_name_length,
                self.extra_field_length,
                self.file_comment_length,
                self.disk_number_start,
                self.internal_attrs,
                self.external_attrs,
                self.local_header_rel_offset,
            )
            + self.file_name
            + self.extra_field
            + self.file_comment
        )

    def describe(self) -> str:
        """A readable multi-line summary of the entry."""
        lines = [
            " CentralDirEntry contents:",
            f"  versMadeBy={self.version_made_by} versToExt={self.version_to_extract}"
            f" gpBits=0x{self.gp_bit_flag:04x} compression={self.compression_method}",
            f"  modTime=0x{self.last_mod_file_time:04x}"
            f" modDate=0x{self.last_mod_file_date:04x} crc32=0x{self.crc32:08x}",
            f"  compressedSize={self.compressed_size}"
            f" uncompressedSize={self.uncompressed_size}",
            f"  filenameLen={self.file_name_length} extraLen={self.extra_field_length}"
            f" commentLen={self.file_comment_length}",
            f"  diskNumStart={self.disk_number_start}"
            f" intAttr=0x{self.internal_attrs:04x}"
            f" extAttr=0x{self.external_attrs:08x}"
            f" relOffset={self.local_header_rel_offset}",
        ]
        if self.file_name:
            lines.append(f"  filename: '{self.file_name.decode('utf-8', 'replace')}'")
        if self.file_comment:
            lines.append(f"  comment: '{self.file_comment.decode('utf-8', 'replace')}'")
        return "\n".join(lines)


@dataclass
class ZipEntry:
    """A file in an archive, described by its central and local headers."""

    cde: CentralDirEntry = field(default_factory=CentralDirEntry)
    lfh: LocalFileHeader = field(default_factory=LocalFileHeader)

    @property
    def file_name(self) -> bytes:
        return self.cde.file_name

    @classmethod
    def from_cde(cls, fp: BinaryIO) -> ZipEntry:
        """Read the central entry at ``fp`` and the local header it points to.

        On return ``fp`` is positioned at the next central entry or the end
        of the central directory.
        """
        entry = cls(cde=CentralDirEntry.read(fp))
        resume = fp.tell()
        try:
            fp.seek(entry.cde.local_header_rel_offset)
        except (OSError, ValueError) as exc:
            raise ZipFormatError(
                f"local header seek failed ({entry.cde.local_header_rel_offset})"
            ) from exc
        entry.lfh = LocalFileHeader.read(fp)
        fp.seek(resume)

        # With a data descriptor the local header is incomplete, so skip the check.
        has_dd = (entry.lfh.gp_bit_flag & USES_DATA_DESCR) != 0
        if not has_dd and not entry.compare_headers():
            logger.warning("header mismatch for %r", entry.cde.file_name)
        return entry

    @classmethod
    def new(cls, file_name: str | bytes, comment: str | bytes | None = None) -> ZipEntry:
        """Create an entry for a file about to be added to an archive."""
        name = _as_bytes(file_name)
        if not name:
            raise ValueError("a file name is required")
        entry = cls(
            cde=CentralDirEntry(
                version_made_by=DEFAULT_MADE_BY,
                version_to_extract=DEFAULT_VERSION,
                compression_method=COMPRESS_STORED,
                file_name=name,
                file_comment=_as_bytes(comment) if comment is not None else b"",
                external_attrs=DEFAULT_EXTERNAL_ATTRS,
            )
        )
        entry.copy_cde_to_lfh()
        return entry

    @classmethod
    def from_external(cls, entry: ZipEntry) -> ZipEntry:
        """Create an entry that copies one taken from another archive."""
        copy = cls(cde=dataclasses.replace(entry.cde))
        copy.copy_cde_to_lfh()
        copy.lfh.extra_field = bytes(entry.lfh.extra_field)
        return copy

    def add_padding(self, padding: int) -> None:
        """Append ``padding`` zero bytes to the local header's extra field."""
        if padding <= 0:
            raise ValueError(f"padding must be positive, got {padding}")
        self.lfh.extra_field = self.lfh.extra_field + bytes(padding)

    def copy_cde_to_lfh(self) -> None:
        """Set the local header's fields from the central entry, except "extra"."""
        self.lfh.version_to_extract = self.cde.version_to_extract
        self.lfh.gp_bit_flag = self.cde.gp_bit_flag
        self.lfh.compression_method = self.cde.compression_method
        self.lfh.last_mod_file_time = self.cde.last_mod_file_time
        self.lfh.last_mod_file_date = self.cde.last_mod_file_date
        self.lfh.crc32 = self.cde.crc32
        self.lfh.compressed_size = self.cde.compressed_size
        self.lfh.uncompressed_size = self.cde.uncompressed_size
        self.lfh.file_name = self.cde.file_name

    def set_data_info(
        self, uncomp_len: int, comp_len: int, crc32: int, compression_method: int
    ) -> None:
        """Record sizes, checksum and method once the file's data is written."""
        self.cde.compression_method = compression_method
        self.cde.crc32 = crc32
        self.cde.compressed_size = comp_len
        self.cde.uncompressed_size = uncomp_len
        if compression_method == COMPRESS_DEFLATED:
            self.cde.gp_bit_flag |= MAX_COMPRESSION_FLAG
        self.copy_cde_to_lfh()

    def compare_headers(self) -> bool:
        """Whether the central entry and local header agree."""
        cde, lfh = self.cde, self.lfh
        checks = (
            ("VersionToExtract", cde.version_to_extract, lfh.version_to_extract),
            ("GPBitFlag", cde.gp_bit_flag, lfh.gp_bit_flag),
            ("CompressionMethod", cde.compression_method, lfh.compression_method),
            ("LastModFileTime", cde.last_mod_file_time, lfh.last_mod_file_time),
            ("LastModFileDate", cde.last_mod_file_date, lfh.last_mod_file_date),
            ("CRC32", cde.crc32, lfh.crc32),
            ("CompressedSize", cde.compressed_size, lfh.compressed_size),
            ("UncompressedSize", cde.uncompressed_size, lfh.uncompressed_size),
            ("FileNameLength", cde.file_name_length, lfh.file_name_length),
        )
        for label, left, right in checks:
            if left != right:
                logger.debug("cmp: %s", label)
                return False
        if cde.file_name and cde.file_name != lfh.file_name:
            logger.debug("cmp: FileName")
            return False
        return True

    def mod_when(self) -> int:
        """The modification time as a UNIX timestamp in local time."""
        ztime = self.cde.last_mod_file_time
        zdate = self.cde.last_mod_file_date
        parts = (
            ((zdate & 0xFE00) >> 9) + 1980,
            (zdate & 0x01E0) >> 5,
            zdate & 0x001F,
            (ztime & 0xF800) >> 11,
            (ztime & 0x07E0) >> 5,
            (ztime & 0x001F) << 1,
            0,
            0,
            -1,
        )
        return int(time.mktime(parts))

    def set_mod_when(self, when: int) -> None:
        """Set both headers' timestamps from a UNIX time, rounded up to even seconds."""
        even = (int(when) + 1) & ~1
        tm = time.localtime(even)
        year = max(tm.tm_year - 1900, 80)
        zdate = ((year - 80) << 9 | tm.tm_mon << 5 | tm.tm_mday) & 0xFFFF
        ztime = (tm.tm_hour << 11 | tm.tm_min << 5 | tm.tm_sec >> 1) & 0xFFFF
        self.cde.last_mod_file_time = self.lfh.last_mod_file_time = ztime
        self.cde.last_mod_file_date = self.lfh.last_mod_file_date = zdate