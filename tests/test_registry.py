import pytest

from zonekit.registry import (
    CLASS_ANY,
    CLASS_IN,
    Field,
    TypeInfo,
    class_by_code,
    class_by_name,
    type_by_code,
    type_by_name,
)

TYPE_NAMES = [
    "A", "NS", "MD", "MF", "CNAME", "SOA", "MB", "MG", "MR", "NULL", "WKS",
    "PTR", "HINFO", "MINFO", "MX", "TXT", "RP", "AFSDB", "X25", "ISDN", "RT",
    "NSAP", "NSAP-PTR", "SIG", "KEY", "PX", "GPOS", "AAAA", "LOC", "NXT",
    "SRV", "NAPTR", "KX", "CERT", "DNAME", "APL", "DS", "SSHFP", "IPSECKEY",
    "RRSIG", "NSEC", "DNSKEY", "DHCID", "NSEC3", "NSEC3PARAM", "TLSA",
    "SMIMEA", "HIP", "NINFO", "RKEY", "CDS", "CDNSKEY", "OPENPGPKEY", "CSYNC",
    "ZONEMD", "SVCB", "HTTPS", "SPF", "NID", "L32", "L64", "LP", "EUI48",
    "EUI64", "URI", "CAA", "AVC", "RESINFO", "WALLET", "CLA", "TA", "DLV",
]


@pytest.mark.parametrize("name", TYPE_NAMES)
def test_type_round_trip_by_name_and_code(name):
    info = type_by_name(name)
    assert info.name == name
    assert type_by_code(info.code) is info
    assert type_by_name(name.lower()) is info


def test_type_codes_are_unique():
    codes = [type_by_name(name).code for name in TYPE_NAMES]
    assert len(set(codes)) == len(codes)


@pytest.mark.parametrize("code", [0, 31, 32, 34, 38, 40, 41, 54, 58, 66, 255, 259, 264])
def test_unknown_type_codes_raise(code):
    with pytest.raises(KeyError):
        type_by_code(code)


def test_unknown_type_name_raises():
    with pytest.raises(KeyError):
        type_by_name("BOGUS")


def test_soa_fields_in_order():
    assert type_by_name("SOA").field_names == (
        "primary", "mailbox", "serial", "refresh", "retry", "expire", "minimum")


def test_rrsig_and_sig_differ_only_in_first_field():
    rrsig = type_by_name("RRSIG").field_names
    sig = type_by_name("SIG").field_names
    assert rrsig[0] == "rrtype"
    assert sig[0] == "sigtype"
    assert rrsig[1:] == sig[1:]
    assert rrsig[-1] == "signature"


def test_class_binding_follows_table():
    for name in ("WKS", "AAAA", "SRV", "SVCB", "HTTPS", "IPSECKEY", "APL"):
        assert type_by_name(name).rrclass == CLASS_IN
    for name in ("A", "NS", "MX", "TXT", "DS", "CAA"):
        assert type_by_name(name).rrclass == CLASS_ANY


def test_aliases_share_fields():
    assert type_by_name("CDS").field_names == type_by_name("DS").field_names
    assert type_by_name("CDNSKEY").field_names == type_by_name("DNSKEY").field_names
    assert type_by_name("TA").field_names == type_by_name("DLV").field_names


def test_ta_maps_to_high_code():
    assert type_by_name("TA").code == 32768
    assert type_by_code(32769).name == "DLV"


def test_a_record_code():
    info = type_by_code(1)
    assert info.name == "A"
    assert info.fields == (Field("address"),)


def test_type_info_str_is_name():
    info = type_by_name("nsap-ptr")
    assert str(info) == "NSAP-PTR"
    assert str(info.fields[0]) == "hostname"


def test_type_info_is_immutable():
    info = type_by_name("MX")
    with pytest.raises(AttributeError):
        info.name = "XX"  # type: ignore[misc]
    assert isinstance(info, TypeInfo)
    assert info.name == "MX"


@pytest.mark.parametrize("name", ["IN", "CS", "CH", "HS"])
def test_class_round_trip(name):
    info = class_by_name(name.lower())
    assert info.name == name
    assert class_by_code(info.code) is info


def test_in_class_code():
    assert class_by_name("IN").code == CLASS_IN


def test_unknown_classes_raise():
    with pytest.raises(KeyError):
        class_by_code(0)
    with pytest.raises(KeyError):
        class_by_name("XX")