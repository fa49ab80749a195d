# zonekit

Checks for DNS resource record data in wire format.

zonekit knows the registry of record types and classes, checks the wire
format of record data for each known type, and decodes base32hex (as used
for the next hashed owner name in NSEC3).

## Installation

```
pip install zonekit
```

## Looking up types and classes

```python
from zonekit.registry import type_by_name, type_by_code, class_by_name

mx = type_by_name("MX")
print(mx.code)                  # 15
print(mx.field_names)           # ('priority', 'hostname')
print(type_by_code(28).name)    # 'AAAA'
print(class_by_name("in").code) # 1
```

Lookups by name ignore case. An unknown code or name raises `KeyError`.
`TypeInfo`, `ClassInfo` and `Field` are frozen dataclasses.

## Checking record data

`check_rdata(code, rdata, owner=b"")` takes a type code and the record data
in wire format, and returns the length of the data. It raises
`ZoneSyntaxError` when the data is malformed and `ZoneSemanticError` when it
is well formed but not acceptable, for example a DS digest whose length does
not match its digest type, or a TTL above 2**31 - 1. Both derive from
`ZoneError`.

```python
from zonekit.validate import check_rdata
from zonekit.fields import ZoneError

check_rdata(1, bytes([192, 0, 2, 1]))      # A record, returns 4

try:
    check_rdata(1, bytes([192, 0, 2]))
except ZoneError as error:
    print(error)                           # Invalid A
```

The owner name, in wire format, is only looked at for NSAP-PTR, whose owner
must be a nibble-reversed NSAP under `NSAP.INT`.

`checker_for(code)` returns a callable `check(rdata, owner=b"")` for a type.
Types without a specific check (including unknown codes) accept any data;
a code outside 0..65535 raises `ValueError`.

The per-type functions are also available directly: `zonekit.records` holds
the classic types (`check_a`, `check_soa`, `check_mx`, `check_txt`, ...) and
`zonekit.extended` the DNSSEC and later ones (`check_ds`, `check_rrsig`,
`check_nsec3`, `check_zonemd`, `check_caa`, ...). They take the type as a
`TypeInfo`, a mnemonic or a code:

```python
from zonekit.records import check_mx

check_mx("MX", b"\x00\x0a\x04mail\x07example\x03com\x00")
```

`zonekit.fields` has the single-field checks they are built from:
`check_bytes`, `check_ttl`, `check_name`, `check_string` and `check_nsec`.

## Base32hex

```python
from zonekit.base32 import decode_base32hex, parse_base32

decode_base32hex("CPNMUOJ1")     # raw decoded bytes, 5 octets
parse_base32("CPNMUOJ1")         # the same, prefixed with its length
```

`decode_base32hex` raises `ValueError` on a character outside the alphabet;
`parse_base32` raises `ZoneSyntaxError` for that and for values longer than
255 octets.

## Bit helpers

`zonekit.bits` holds small 64-bit helpers: `trailing_zeroes`,
`leading_zeroes`, `count_ones`, `clear_lowest_bit`, `prefix_xor` and
`add_overflow` (which returns the wrapped sum and an overflow flag).

## What zonekit does not do

zonekit works on record data that is already in wire format. It does not
read zone files or the text presentation of records, including the generic
`\# <length> <hex>` form, and it has no command-line tool.

## Running the tests

```
pip install zonekit[test]
pytest
```