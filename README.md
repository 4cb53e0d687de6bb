# zipkit

This package provides pure-Python building blocks for the per-entry records of
zip archives, along with a few small utilities that go with them. It has no
dependencies outside the standard library.

## Installation

```
pip install zipkit
```

To run the test suite, install `zipkit[test]`.

## Zip entries

`zipkit.entry` reads and writes the two records that describe each file in a
zip archive:

- `LocalFileHeader` is the header that comes before a file's data.
- `CentralDirEntry` is the file's record in the central directory.

Each of them has a `read(fp)` classmethod, a `write(fp)` method and a
`describe()` method that returns a readable summary. `ZipEntry` holds the two
records together as `cde` and `lfh`.

```python
from zipkit.entry import ZipEntry

entry = ZipEntry.new("assets/data.bin", None)
entry.set_data_info(1024, 1024, 0x12345678, 0)   # sizes, CRC-32, method (0 = stored)
entry.set_mod_when(1_700_000_000)                 # UNIX time, rounded up to even seconds
entry.add_padding(3)                              # zero bytes appended to the local extra field
assert entry.compare_headers()
```

The other `ZipEntry` methods work as follows:

- `ZipEntry.from_cde(fp)` reads a central directory record from a binary file.
  It then seeks to the local header that the record points to and reads that as
  well. Afterwards it puts the file back just after the central record. If the
  two headers disagree, it logs a warning. It skips this check when the entry
  uses a data descriptor.
- `ZipEntry.from_external(entry)` copies an entry taken from another archive.
  The copy keeps the local header's extra field of the original.
- `set_data_info(...)` records the entry's sizes, checksum and method. For a
  deflated entry (method 8) it also sets the maximum-compression flag.
- `mod_when()` converts the stored DOS timestamp into a UNIX timestamp in local
  time.

Truncated input or a wrong signature raises `ZipFormatError`. Calling
`add_padding` with a count that is not positive raises `ValueError`, and so
does calling `ZipEntry.new` with an empty name.

## Byte order and Zip times

`zipkit.byteorder` provides:

- `get2le(buf, offset)` and `get4le(buf, offset)`, which read unsigned
  little-endian integers. They raise `ValueError` if the buffer is too short.
- `swap_short(v)` and `swap_long(v)`, which reverse the bytes of a 16-bit or a
  32-bit value.
- `zip_time_to_parts(when)`, which splits a packed date and time (date in the
  high 16 bits) into a `ZipTime`. A `ZipTime` has `year` (years since 1900),
  `month`, `day`, `hour`, `minute`, `second` and `calendar_year`.

## Text

- `zipkit.jstring` converts between UTF-8 bytes and lists of UTF-16 code units.
  It provides `utf16_to_utf8`, `utf8_to_utf16`, `utf8_length_of_utf16` and
  `utf16_length_of_utf8`. When it encodes to UTF-8, it encodes each code unit
  on its own. A surrogate pair therefore becomes two 3-byte sequences.
- `zipkit.string16.String16` is a mutable string of UTF-16 code units. You can
  build one from a `str`, from UTF-8 `bytes`, from another `String16` or from
  an iterable of code units. Its methods are `append`, `insert`, `find_first`,
  `find_last`, `starts_with`, `make_lower` (ASCII letters only), `replace_all`,
  `remove` and `compare`. Strings compare by code unit.
- `zipkit.tokenizer.Tokenizer` reads text line by line. Create one with
  `Tokenizer.open(path)` or `Tokenizer.from_contents(name, text)`. Then use
  `next_token(delims)`, `skip_delimiters(delims)`, `next_line()`,
  `next_char()`, `peek_char()` and `peek_remainder_of_line()`. `location()`
  reports the position in the form `name:line`.

## Other utilities

- `zipkit.bitset.BitSet32` is a set of 32 bits. Bit 0 is the most significant
  bit of `value`. The methods that find the first or last bit raise
  `ValueError` when no such bit exists.
- `zipkit.linear_transform.LinearTransform` maps values between two coordinate
  spaces using a rational scale. `forward(a)` maps from the first space and
  `reverse(b)` maps back; both round towards negative infinity. A singular
  transform raises `ZeroDivisionError`, and a result that does not fit in 64
  bits raises `OverflowError`. `reduce_fraction(numer, denom)` reduces a
  fraction to lowest terms.
- `zipkit.filemap.FileMap.create(name, fd, offset, length, read_only)` maps a
  region of an open file into memory. Use `data()` to get the bytes as a
  `memoryview` and `advise(MapAdvice...)` to give an access hint. Call
  `close()` when you are done, or use the map as a context manager.
- `zipkit.atomic.AtomicInt32` is a lock-protected 32-bit signed integer whose
  arithmetic wraps around. It provides `inc`, `dec`, `add`, `bitwise_and` and
  `bitwise_or`, each of which returns the previous value. It also provides
  `load`, `store` and `compare_and_set`.

## What this package does not do

This is a library of parts, not an archiving tool, and it has no command-line
program. It reads and writes individual entry headers but not whole archives.
It does not locate or write the end-of-central-directory record, and it does
not compress or decompress file data. It also does not align a complete
archive for you. Callers use `add_padding` and the read and write methods to
build that themselves.

## Running the tests

```
pytest
```