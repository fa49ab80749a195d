"""Known record types and classes with the names of their RDATA fields."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType

CLASS_IN = 1
CLASS_CS = 2
CLASS_CH = 3
CLASS_HS = 4
CLASS_ANY = 255


@dataclass(frozen=True)
class Field:
    """A named RDATA field."""

    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class ClassInfo:
    """A record class mnemonic and its code."""

    name: str
    code: int

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class TypeInfo:
    """A record type: mnemonic, code, class it is bound to and its fields."""

    name: str
    code: int
    rrclass: int = CLASS_ANY
    fields: tuple[Field, ...] = field(default_factory=tuple)

    def __str__(self) -> str:
        return self.name

    @property
    def field_names(self) -> tuple[str, ...]:
        return tuple(f.name for f in self.fields)


def _type(name: str, code: int, rrclass: int, *field_names: str) -> TypeInfo:
    return TypeInfo(name, code, rrclass, tuple(Field(n) for n in field_names))


_DS_FIELDS = ("keytag", "algorithm", "digtype", "digest")
_DNSKEY_FIELDS = ("flags", "protocol", "algorithm", "publickey")
_SIG_FIELDS = ("algorithm", "labels", "origttl", "expire", "inception",
               "keytag", "signer", "signature")
_TLSA_FIELDS = ("usage", "selector", "matching type",
                "certificate association data")
_TA_FIELDS = ("key", "algorithm", "type", "digest")

_TYPES: tuple[TypeInfo, ...] = (
    _type("A", 1, CLASS_ANY, "address"),
    _type("NS", 2, CLASS_ANY, "host"),
    _type("MD", 3, CLASS_ANY, "madname"),
    _type("MF", 4, CLASS_ANY, "madname"),
    _type("CNAME", 5, CLASS_ANY, "host"),
    _type("SOA", 6, CLASS_ANY, "primary", "mailbox", "serial", "refresh",
          "retry", "expire", "minimum"),
    _type("MB", 7, CLASS_ANY, "madname"),
    _type("MG", 8, CLASS_ANY, "mgmname"),
    _type("MR", 9, CLASS_ANY, "newname"),
    _type("NULL", 10, CLASS_ANY, "anything"),
    _type("WKS", 11, CLASS_IN, "address", "protocol", "bitmap"),
    _type("PTR", 12, CLASS_ANY, "ptrdname"),
    _type("HINFO", 13, CLASS_ANY, "cpu", "os"),
    _type("MINFO", 14, CLASS_ANY, "rmailbx", "emailbx"),
    _type("MX", 15, CLASS_ANY, "priority", "hostname"),
    _type("TXT", 16, CLASS_ANY, "text"),
    _type("RP", 17, CLASS_ANY, "mailbox", "text"),
    _type("AFSDB", 18, CLASS_ANY, "subtype", "hostname"),
    _type("X25", 19, CLASS_ANY, "address"),
    _type("ISDN", 20, CLASS_ANY, "address", "subaddress"),
    _type("RT", 21, CLASS_ANY, "preference", "hostname"),
    _type("NSAP", 22, CLASS_IN, "address"),
    _type("NSAP-PTR", 23, CLASS_IN, "hostname"),
    _type("SIG", 24, CLASS_ANY, "sigtype", *_SIG_FIELDS),
    _type("KEY", 25, CLASS_ANY, *_DNSKEY_FIELDS),
    _type("PX", 26, CLASS_IN, "preference", "map822", "mapx400"),
    _type("GPOS", 27, CLASS_ANY, "latitude", "longitude", "altitude"),
    _type("AAAA", 28, CLASS_IN, "address"),
    _type("LOC", 29, CLASS_ANY, "version", "size", "horizontal precision",
          "vertical precision", "latitude", "longitude", "altitude"),
    _type("NXT", 30, CLASS_ANY, "next domain name", "type bit map"),
    _type("SRV", 33, CLASS_IN, "priority", "weight", "port", "target"),
    _type("NAPTR", 35, CLASS_IN, "order", "preference", "flags", "services",
          "regex", "replacement"),
    _type("KX", 36, CLASS_IN, "preference", "exchanger"),
    _type("CERT", 37, CLASS_ANY, "type", "key tag", "algorithm", "certificate"),
    _type("DNAME", 39, CLASS_ANY, "source"),
    _type("APL", 42, CLASS_IN, "prefix"),
    _type("DS", 43, CLASS_ANY, *_DS_FIELDS),
    _type("SSHFP", 44, CLASS_ANY, "algorithm", "ftype", "fingerprint"),
    _type("IPSECKEY", 45, CLASS_IN, "precedence", "gateway type", "algorithm",
          "gateway", "public key"),
    _type("RRSIG", 46, CLASS_ANY, "rrtype", *_SIG_FIELDS),
    _type("NSEC", 47, CLASS_ANY, "next", "types"),
    _type("DNSKEY", 48, CLASS_ANY, *_DNSKEY_FIELDS),
    _type("DHCID", 49, CLASS_IN, "dhcpinfo"),
    _type("NSEC3", 50, CLASS_ANY, "algorithm", "flags", "iterations", "salt",
          "next", "types"),
    _type("NSEC3PARAM", 51, CLASS_ANY, "algorithm", "flags", "iterations",
          "salt"),
    _type("TLSA", 52, CLASS_ANY, *_TLSA_FIELDS),
    _type("SMIMEA", 53, CLASS_ANY, *_TLSA_FIELDS),
    _type("HIP", 55, CLASS_ANY, "HIT length", "PK algorithm", "PK length",
          "HIT", "Public Key", "Rendezvous Servers"),
    _type("NINFO", 56, CLASS_ANY, "text"),
    _type("RKEY", 57, CLASS_ANY, *_DNSKEY_FIELDS),
    _type("CDS", 59, CLASS_ANY, *_DS_FIELDS),
    _type("CDNSKEY", 60, CLASS_ANY, *_DNSKEY_FIELDS),
    _type("OPENPGPKEY", 61, CLASS_ANY, "key"),
    _type("CSYNC", 62, CLASS_ANY, "serial", "flags", "types"),
    _type("ZONEMD", 63, CLASS_ANY, "serial", "scheme", "algorithm", "digest"),
    _type("SVCB", 64, CLASS_IN, "priority", "target", "params"),
    _type("HTTPS", 65, CLASS_IN, "priority", "target", "params"),
    _type("SPF", 99, CLASS_ANY, "text"),
    _type("NID", 104, CLASS_ANY, "preference", "nodeid"),
    _type("L32", 105, CLASS_ANY, "preference", "locator"),
    _type("L64", 106, CLASS_ANY, "preference", "locator"),
    _type("LP", 107, CLASS_ANY, "preference", "pointer"),
    _type("EUI48", 108, CLASS_ANY, "address"),
    _type("EUI64", 109, CLASS_ANY, "address"),
    _type("URI", 256, CLASS_ANY, "priority", "weight", "target"),
    _type("CAA", 257, CLASS_ANY, "flags", "tag", "value"),
    _type("AVC", 258, CLASS_ANY, "text"),
    _type("RESINFO", 261, CLASS_ANY, "text"),
    _type("WALLET", 262, CLASS_ANY, "text"),
    _type("CLA", 263, CLASS_ANY, "text"),
    _type("TA", 32768, CLASS_ANY, *_TA_FIELDS),
    _type("DLV", 32769, CLASS_ANY, *_TA_FIELDS),
)

_CLASSES: tuple[ClassInfo, ...] = (
    ClassInfo("IN", CLASS_IN),
    ClassInfo("CS", CLASS_CS),
    ClassInfo("CH", CLASS_CH),
    ClassInfo("HS", CLASS_HS),
)

TYPES_BY_CODE = MappingProxyType({t.code: t for t in _TYPES})
TYPES_BY_NAME = MappingProxyType({t.name: t for t in _TYPES})
CLASSES_BY_CODE = MappingProxyType({c.code: c for c in _CLASSES})
CLASSES_BY_NAME = MappingProxyType({c.name: c for c in _CLASSES})


def type_by_code(code: int) -> TypeInfo:
    """Return the known type with this code; raise KeyError otherwise."""
    try:
        return TYPES_BY_CODE[code]
    except KeyError:
        raise KeyError(f"Unknown record type {code}") from None


def type_by_name(name: str) -> TypeInfo:
    """Return the known type with this mnemonic, in any case; raise KeyError otherwise."""
    try:
        return TYPES_BY_NAME[name.upper()]
    except KeyError:
        raise KeyError(f"Unknown record type {name!r}") from None


def class_by_code(code: int) -> ClassInfo:
    """Return the known class with this code; raise KeyError otherwise."""
    try:
        return CLASSES_BY_CODE[code]
    except KeyError:
        raise KeyError(f"Unknown record class {code}") from None


def class_by_name(name: str) -> ClassInfo:
    """Return the known class with this mnemonic, in any case; raise KeyError otherwise."""
    try:
        return CLASSES_BY_NAME[name.upper()]
    except KeyError:
        raise KeyError(f"Unknown record class {name!r}") from None