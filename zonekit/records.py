"""Wire-format checks for the RDATA of the classic record types."""

from __future__ import annotations

from zonekit.fields import (
    ZoneSyntaxError,
    check_bytes,
    check_name,
    check_string,
    check_ttl,
)
from zonekit.registry import TypeInfo, type_by_code, type_by_name

_HEX_DIGITS = frozenset(b"0123456789abcdefABCDEF")
_NSAP_INT = b"\x04nsap\x03int"
_WKS_MAX_LENGTH = 8192 + 5


def _resolve(rrtype: TypeInfo | str | int) -> TypeInfo:
    if isinstance(rrtype, TypeInfo):
        return rrtype
    if isinstance(rrtype, str):
        return type_by_name(rrtype)
    return type_by_code(rrtype)


class _Cursor:
    """Walks the fields of one RDATA, advancing past each field it checks."""

    def __init__(self, rrtype: TypeInfo | str | int, rdata: bytes) -> None:
        self.type = _resolve(rrtype)
        self.data = bytes(rdata)
        self.offset = 0

    @property
    def rest(self) -> bytes:
        return self.data[self.offset:]

    @property
    def remaining(self) -> int:
        return len(self.data) - self.offset

    def _field(self, index: int) -> str:
        fields = self.type.fields
        return fields[index].name if index < len(fields) else "field"

    def _fixed(self, index: int, size: int) -> None:
        self.offset += check_bytes(
            self.rest, size, self._field(index), self.type.name)

    def int8(self, index: int) -> None:
        self._fixed(index, 1)

    def int16(self, index: int) -> None:
        self._fixed(index, 2)

    def int32(self, index: int) -> None:
        self._fixed(index, 4)

    def ip4(self, index: int) -> None:
        self._fixed(index, 4)

    def ip6(self, index: int) -> None:
        self._fixed(index, 16)

    def ttl(self, index: int) -> None:
        self.offset += check_ttl(self.rest, self._field(index), self.type.name)

    def name(self, index: int) -> None:
        self.offset += check_name(self.rest, self._field(index), self.type.name)

    def string(self, index: int) -> None:
        self.offset += check_string(
            self.rest, self._field(index), self.type.name)

    def fail(self, suffix: str = "") -> None:
        raise ZoneSyntaxError(f"Invalid {self.type.name}{suffix}")

    def finish(self, suffix: str = "") -> int:
        """Require that every octet was consumed; return the RDATA length."""
        if self.offset != len(self.data):
            self.fail(suffix)
        return len(self.data)


def _names(rrtype: TypeInfo | str | int, rdata: bytes, count: int) -> int:
    cursor = _Cursor(rrtype, rdata)
    for index in range(count):
        cursor.name(index)
    return cursor.finish()


def is_nsap_ptr_owner(owner: bytes) -> bool:
    """Whether a wire-format owner is a nibble-reversed NSAP under NSAP.INT."""
    owner = bytes(owner)
    length = len(owner)
    index = 0
    while (index + 1 < length and owner[index] == 1
           and owner[index + 1] in _HEX_DIGITS):
        index += 2
    if not index or index + 10 != length:
        return False
    return owner[index:index + 9].lower() == _NSAP_INT


def check_a(rrtype, rdata: bytes) -> int:
    """An IPv4 address of exactly four octets."""
    cursor = _Cursor(rrtype, rdata)
    if len(cursor.data) != 4:
        cursor.fail()
    return 4


def check_ns(rrtype, rdata: bytes) -> int:
    """A single domain name (NS, CNAME, PTR, DNAME and alike)."""
    return _names(rrtype, rdata, 1)


def check_soa(rrtype, rdata: bytes) -> int:
    """Two names, a serial and four TTL-like timers."""
    cursor = _Cursor(rrtype, rdata)
    cursor.name(0)
    cursor.name(1)
    cursor.int32(2)
    for index in range(3, 7):
        cursor.ttl(index)
    return cursor.finish()


def check_wks(rrtype, rdata: bytes) -> int:
    """An address, a protocol and a port bitmap of bounded size."""
    cursor = _Cursor(rrtype, rdata)
    cursor.ip4(0)
    cursor.int8(1)
    if len(cursor.data) > _WKS_MAX_LENGTH:
        cursor.fail()
    return len(cursor.data)


def check_hinfo(rrtype, rdata: bytes) -> int:
    """Two character strings."""
    cursor = _Cursor(rrtype, rdata)
    cursor.string(0)
    cursor.string(1)
    return cursor.finish()


def check_minfo(rrtype, rdata: bytes) -> int:
    """Two domain names (MINFO, RP)."""
    return _names(rrtype, rdata, 2)


def check_mx(rrtype, rdata: bytes) -> int:
    """A 16-bit preference followed by a domain name."""
    cursor = _Cursor(rrtype, rdata)
    cursor.int16(0)
    cursor.name(1)
    return cursor.finish()


def check_txt(rrtype, rdata: bytes) -> int:
    """One or more character strings."""
    cursor = _Cursor(rrtype, rdata)
    cursor.string(0)
    while cursor.remaining > 0:
        cursor.string(0)
    return cursor.finish()


def check_x25(rrtype, rdata: bytes) -> int:
    """A single character string."""
    cursor = _Cursor(rrtype, rdata)
    cursor.string(0)
    return cursor.finish()


def check_isdn(rrtype, rdata: bytes) -> int:
    """An address string and an optional subaddress string."""
    cursor = _Cursor(rrtype, rdata)
    cursor.string(0)
    if cursor.remaining > 0:
        cursor.string(1)
    return cursor.finish()


def check_rt(rrtype, rdata: bytes) -> int:
    """A 16-bit preference followed by an intermediate host name."""
    return check_mx(rrtype, rdata)


def check_nsap(rrtype, rdata: bytes) -> int:
    """A non-empty NSAP address."""
    cursor = _Cursor(rrtype, rdata)
    if not cursor.data:
        cursor.fail()
    return len(cursor.data)


def check_nsap_ptr(rrtype, rdata: bytes, owner: bytes) -> int:
    """A single name, whose owner must lie under NSAP.INT in nibble form."""
    cursor = _Cursor(rrtype, rdata)
    cursor.name(0)
    length = cursor.finish()
    if not is_nsap_ptr_owner(owner):
        cursor.fail()
    return length


def check_px(rrtype, rdata: bytes) -> int:
    """A 16-bit preference followed by two domain names."""
    cursor = _Cursor(rrtype, rdata)
    cursor.int16(0)
    cursor.name(1)
    cursor.name(2)
    return cursor.finish(" record")


def check_gpos(rrtype, rdata: bytes) -> int:
    """Latitude, longitude and altitude as character strings."""
    cursor = _Cursor(rrtype, rdata)
    for index in range(3):
        cursor.string(index)
    return cursor.finish(" record")


def check_aaaa(rrtype, rdata: bytes) -> int:
    """An IPv6 address of exactly sixteen octets."""
    cursor = _Cursor(rrtype, rdata)
    cursor.ip6(0)
    return cursor.finish(" record")


def check_loc(rrtype, rdata: bytes) -> int:
    """LOC RDATA of exactly sixteen octets."""
    cursor = _Cursor(rrtype, rdata)
    if len(cursor.data) != 16:
        cursor.fail(" record")
    return 16


def check_nxt(rrtype, rdata: bytes) -> int:
    """A next domain name followed by a type bit map that is not inspected."""
    cursor = _Cursor(rrtype, rdata)
    cursor.name(0)
    return len(cursor.data)


def check_srv(rrtype, rdata: bytes) -> int:
    """Priority, weight and port followed by a target name."""
    cursor = _Cursor(rrtype, rdata)
    cursor.int16(0)
    cursor.int16(1)
    cursor.int16(2)
    cursor.name(3)
    return cursor.finish()


def check_cert(rrtype, rdata: bytes) -> int:
    """Type, key tag and algorithm followed by the certificate."""
    cursor = _Cursor(rrtype, rdata)
    if len(cursor.data) < 6:
        cursor.fail()
    return len(cursor.data)