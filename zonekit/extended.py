"""Wire-format checks for the RDATA of DNSSEC and later record types."""

from __future__ import annotations

from zonekit.fields import ZoneSemanticError, ZoneSyntaxError, check_nsec
from zonekit.records import _Cursor

# Digest sizes by DS digest type; zero means the size is not enforced.
_DS_DIGEST_SIZES = (0, 20, 32, 32, 48, 48, 48, 0)
# Digest sizes by ZONEMD hash algorithm; zero means not enforced.
_ZONEMD_DIGEST_SIZES = (0, 48, 64, 0)
# Fingerprint sizes by SSHFP fingerprint type.
_SSHFP_FINGERPRINT_SIZES = {1: ("SHA1", 20), 2: ("SHA256", 32)}


class _ExtendedCursor(_Cursor):
    """Cursor that also understands type bitmaps and 64-bit locators."""

    def nsec(self, index: int) -> None:
        self.offset += check_nsec(self.rest, self._field(index), self.type.name)

    def ilnp64(self, index: int) -> None:
        self._fixed(index, 8)

    def require_more(self) -> int:
        """Require trailing octets after the fields checked; return the length."""
        if self.offset >= len(self.data):
            self.fail()
        return len(self.data)


def check_ds(rrtype, rdata: bytes) -> int:
    """Key tag, algorithm, digest type and a digest of the size its type fixes."""
    cursor = _ExtendedCursor(rrtype, rdata)
    cursor.int16(0)
    cursor.int8(1)
    cursor.int8(2)
    digest_type = cursor.data[3]
    if digest_type < len(_DS_DIGEST_SIZES):
        size = _DS_DIGEST_SIZES[digest_type]
        if size and len(cursor.data) - 4 != size:
            raise ZoneSemanticError(f"Invalid digest in {cursor.type.name}")
    return cursor.require_more()


def check_sshfp(rrtype, rdata: bytes) -> int:
    """Algorithm, fingerprint type and a fingerprint of the matching size."""
    cursor = _ExtendedCursor(rrtype, rdata)
    cursor.int8(0)
    cursor.int8(1)
    if cursor.remaining == 0:
        raise ZoneSyntaxError(
            f"Missing {cursor._field(1)} in {cursor.type.name}")
    known = _SSHFP_FINGERPRINT_SIZES.get(cursor.data[1])
    if known is not None and cursor.remaining != known[1]:
        raise ZoneSemanticError(
            f"Wrong fingerprint size for type {known[0]} in {cursor.type.name}")
    return len(cursor.data)


def check_ipseckey(rrtype, rdata: bytes) -> int:
    """Precedence, gateway type, algorithm, gateway and optional public key."""
    cursor = _ExtendedCursor(rrtype, rdata)
    cursor.int8(0)
    cursor.int8(1)
    cursor.int8(2)
    gateway_type = cursor.data[1]
    if gateway_type == 1:
        cursor.ip4(3)
    elif gateway_type == 2:
        cursor.ip6(3)
    elif gateway_type == 3:
        cursor.name(3)
    elif gateway_type != 0:
        cursor.fail()
    if cursor.data[2] == 0:
        if cursor.remaining > 0:
            raise ZoneSyntaxError(f"Trailing data in {cursor.type.name}")
    elif cursor.remaining <= 0:
        raise ZoneSyntaxError(
            f"Missing {cursor._field(4)} in {cursor.type.name}")
    return len(cursor.data)


def check_rrsig(rrtype, rdata: bytes) -> int:
    """Fixed signature header and signer name; the signature is not inspected."""
    cursor = _ExtendedCursor(rrtype, rdata)
    cursor.int16(0)
    cursor.int8(1)
    cursor.int8(2)
    cursor.ttl(3)
    cursor.int32(4)
    cursor.int32(5)
    cursor.int16(6)
    cursor.name(7)
    return len(cursor.data)


def check_nsec_record(rrtype, rdata: bytes) -> int:
    """A next owner name followed by a type bitmap."""
    cursor = _ExtendedCursor(rrtype, rdata)
    cursor.name(0)
    cursor.nsec(1)
    return cursor.finish()


def check_dnskey(rrtype, rdata: bytes) -> int:
    """Flags, protocol, algorithm and a non-empty public key."""
    cursor = _ExtendedCursor(rrtype, rdata)
    cursor.int16(0)
    cursor.int8(1)
    cursor.int8(2)
    return cursor.require_more()


def check_dhcid(rrtype, rdata: bytes) -> int:
    """Identifier type, digest type and at least one octet of digest."""
    cursor = _ExtendedCursor(rrtype, rdata)
    if len(cursor.data) < 4:
        raise ZoneSemanticError(f"Invalid {cursor.type.name}")
    return len(cursor.data)


def check_nsec3(rrtype, rdata: bytes) -> int:
    """Hash parameters, salt, next hashed owner and a type bitmap."""
    cursor = _ExtendedCursor(rrtype, rdata)
    cursor.int8(0)
    cursor.int8(1)
    cursor.int16(2)
    cursor.string(3)
    cursor.string(4)
    cursor.nsec(5)
    return cursor.finish()


def check_nsec3param(rrtype, rdata: bytes) -> int:
    """Hash algorithm, flags, iterations and salt."""
    cursor = _ExtendedCursor(rrtype, rdata)
    cursor.int8(0)
    cursor.int8(1)
    cursor.int16(2)
    cursor.string(3)
    return cursor.finish()


def check_tlsa(rrtype, rdata: bytes) -> int:
    """Usage, selector, matching type and non-empty association data."""
    cursor = _ExtendedCursor(rrtype, rdata)
    cursor.int8(0)
    cursor.int8(1)
    cursor.int8(2)
    return cursor.require_more()


def check_openpgpkey(rrtype, rdata: bytes) -> int:
    """A key of at least four octets."""
    cursor = _ExtendedCursor(rrtype, rdata)
    if len(cursor.data) < 4:
        cursor.fail()
    return len(cursor.data)


def check_csync(rrtype, rdata: bytes) -> int:
    """Serial, flags and a type bitmap."""
    cursor = _ExtendedCursor(rrtype, rdata)
    cursor.int32(0)
    cursor.int16(1)
    cursor.nsec(2)
    return cursor.finish()


def check_zonemd(rrtype, rdata: bytes) -> int:
    """Serial, scheme, hash algorithm and a digest of the size it fixes."""
    cursor = _ExtendedCursor(rrtype, rdata)
    cursor.int32(0)
    cursor.int8(1)
    cursor.int8(2)
    algorithm = cursor.data[5]
    if algorithm < len(_ZONEMD_DIGEST_SIZES):
        size = _ZONEMD_DIGEST_SIZES[algorithm]
        if size and len(cursor.data) - 6 != size:
            raise ZoneSemanticError(f"Invalid digest in {cursor.type.name}")
    return len(cursor.data)


def check_nid(rrtype, rdata: bytes) -> int:
    """A 16-bit preference and a 64-bit node identifier."""
    cursor = _ExtendedCursor(rrtype, rdata)
    cursor.int16(0)
    cursor.ilnp64(1)
    return cursor.finish()


def check_l32(rrtype, rdata: bytes) -> int:
    """A 16-bit preference and a 32-bit locator."""
    cursor = _ExtendedCursor(rrtype, rdata)
    cursor.int16(0)
    cursor.ip4(1)
    return cursor.finish()


def check_l64(rrtype, rdata: bytes) -> int:
    """A 16-bit preference and a 64-bit locator."""
    cursor = _ExtendedCursor(rrtype, rdata)
    cursor.int16(0)
    cursor.ilnp64(1)
    return cursor.finish()


def check_eui48(rrtype, rdata: bytes) -> int:
    """An EUI-48 address of exactly six octets."""
    cursor = _ExtendedCursor(rrtype, rdata)
    if len(cursor.data) != 6:
        cursor.fail()
    return 6


def check_eui64(rrtype, rdata: bytes) -> int:
    """An EUI-64 address of exactly eight octets."""
    cursor = _ExtendedCursor(rrtype, rdata)
    if len(cursor.data) != 8:
        cursor.fail()
    return 8


def check_uri(rrtype, rdata: bytes) -> int:
    """Priority, weight and a non-empty target."""
    cursor = _ExtendedCursor(rrtype, rdata)
    cursor.int16(0)
    cursor.int16(1)
    return cursor.require_more()


def check_caa(rrtype, rdata: bytes) -> int:
    """Flags, tag length and at least one octet of tag and value."""
    cursor = _ExtendedCursor(rrtype, rdata)
    cursor.int8(0)
    cursor.int8(1)
    return cursor.require_more()