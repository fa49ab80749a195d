"""Dispatch of wire-format RDATA checks by record type code."""

from __future__ import annotations

from typing import Callable

from zonekit import extended, records
from zonekit.registry import TYPES_BY_CODE, TypeInfo

_OwnerCheck = Callable[[TypeInfo, bytes, bytes], int]
Checker = Callable[..., int]


def _generic(rrtype: TypeInfo, rdata: bytes, owner: bytes) -> int:
    """Accept any RDATA; used for types whose contents are not inspected."""
    return len(rdata)


def _plain(check: Callable[[TypeInfo, bytes], int]) -> _OwnerCheck:
    def run(rrtype: TypeInfo, rdata: bytes, owner: bytes) -> int:
        return check(rrtype, rdata)

    run.__name__ = check.__name__
    run.__doc__ = check.__doc__
    return run


def _nsap_ptr(rrtype: TypeInfo, rdata: bytes, owner: bytes) -> int:
    return records.check_nsap_ptr(rrtype, rdata, owner)


def _table() -> dict[int, _OwnerCheck]:
    groups: list[tuple[_OwnerCheck, tuple[int, ...]]] = [
        (_plain(records.check_a), (1,)),
        (_plain(records.check_ns), (2, 3, 4, 5, 7, 8, 9, 12, 39)),
        (_plain(records.check_soa), (6,)),
        (_generic, (10, 25, 35, 42, 55, 64, 65)),
        (_plain(records.check_wks), (11,)),
        (_plain(records.check_hinfo), (13,)),
        (_plain(records.check_minfo), (14, 17)),
        (_plain(records.check_mx), (15, 18, 36, 107)),
        (_plain(records.check_txt), (16, 56, 99, 258, 261, 262, 263)),
        (_plain(records.check_x25), (19,)),
        (_plain(records.check_isdn), (20,)),
        (_plain(records.check_rt), (21,)),
        (_plain(records.check_nsap), (22,)),
        (_nsap_ptr, (23,)),
        (_plain(extended.check_rrsig), (24, 46)),
        (_plain(records.check_px), (26,)),
        (_plain(records.check_gpos), (27,)),
        (_plain(records.check_aaaa), (28,)),
        (_plain(records.check_loc), (29,)),
        (_plain(records.check_nxt), (30,)),
        (_plain(records.check_srv), (33,)),
        (_plain(records.check_cert), (37,)),
        (_plain(extended.check_ds), (43, 59, 32768, 32769)),
        (_plain(extended.check_sshfp), (44,)),
        (_plain(extended.check_ipseckey), (45,)),
        (_plain(extended.check_nsec_record), (47,)),
        (_plain(extended.check_dnskey), (48, 57, 60)),
        (_plain(extended.check_dhcid), (49,)),
        (_plain(extended.check_nsec3), (50,)),
        (_plain(extended.check_nsec3param), (51,)),
        (_plain(extended.check_tlsa), (52, 53)),
        (_plain(extended.check_openpgpkey), (61,)),
        (_plain(extended.check_csync), (62,)),
        (_plain(extended.check_zonemd), (63,)),
        (_plain(extended.check_nid), (104,)),
        (_plain(extended.check_l32), (105,)),
        (_plain(extended.check_l64), (106,)),
        (_plain(extended.check_eui48), (108,)),
        (_plain(extended.check_eui64), (109,)),
        (_plain(extended.check_uri), (256,)),
        (_plain(extended.check_caa), (257,)),
    ]
    return {code: check for check, codes in groups for code in codes}


_CHECKS = _table()


def _type_info(code: int) -> TypeInfo:
    known = TYPES_BY_CODE.get(code)
    if known is not None:
        return known
    return TypeInfo(f"TYPE{code}", code)


def checker_for(code: int) -> Checker:
    """Return a callable ``check(rdata, owner=b"")`` validating RDATA of this type.

    Unknown types accept any RDATA. The callable returns the RDATA length and
    raises a ZoneError when the RDATA is not acceptable.
    """
    if not isinstance(code, int) or not 0 <= code <= 0xFFFF:
        raise ValueError(f"Invalid record type code {code!r}")
    rrtype = _type_info(code)
    check = _CHECKS.get(code, _generic)

    def checker(rdata: bytes, owner: bytes = b"") -> int:
        return check(rrtype, bytes(rdata), bytes(owner))

    checker.__name__ = f"check_{rrtype.name.lower().replace('-', '_')}"
    return checker


def check_rdata(code: int, rdata: bytes, owner: bytes = b"") -> int:
    """Validate RDATA of the given type code; return its length."""
    return checker_for(code)(rdata, owner)