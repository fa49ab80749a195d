import pytest

from zonekit.extended import (
    check_caa,
    check_csync,
    check_dhcid,
    check_dnskey,
    check_ds,
    check_eui48,
    check_eui64,
    check_ipseckey,
    check_l32,
    check_l64,
    check_nid,
    check_nsec3,
    check_nsec3param,
    check_nsec_record,
    check_openpgpkey,
    check_rrsig,
    check_sshfp,
    check_tlsa,
    check_uri,
    check_zonemd,
)
from zonekit.fields import ZoneError, ZoneSemanticError, ZoneSyntaxError

NAME = b"\x07example\x03com\x00"
BITMAP = b"\x00\x01\x40"


def test_ds_sha256_accepted():
    rdata = b"\x30\x39\x08\x02" + bytes(32)
    assert check_ds("DS", rdata) == len(rdata)


def test_ds_wrong_digest_size_is_semantic():
    with pytest.raises(ZoneSemanticError, match="Invalid digest in DS"):
        check_ds("DS", b"\x30\x39\x08\x02" + bytes(20))


def test_ds_unassigned_digest_type_any_size():
    rdata = b"\x30\x39\x08\x09" + bytes(5)
    assert check_ds("CDS", rdata) == len(rdata)


def test_ds_missing_digest():
    with pytest.raises(ZoneSyntaxError):
        check_ds("DS", b"\x30\x39\x08\x07")


def test_ds_truncated_header():
    with pytest.raises(ZoneSyntaxError, match="Missing"):
        check_ds("DS", b"\x30\x39")


def test_sshfp_sizes():
    rdata = b"\x01\x02" + bytes(32)
    assert check_sshfp("SSHFP", rdata) == len(rdata)
    with pytest.raises(ZoneSemanticError, match="SHA1"):
        check_sshfp("SSHFP", b"\x01\x01" + bytes(32))
    with pytest.raises(ZoneSemanticError, match="SHA256"):
        check_sshfp("SSHFP", b"\x01\x02" + bytes(20))


def test_sshfp_missing_fingerprint():
    with pytest.raises(ZoneSyntaxError, match="Missing"):
        check_sshfp("SSHFP", b"\x01\x02")


def test_ipseckey_ipv4_gateway():
    rdata = bytes([10, 1, 2, 192, 0, 2, 38]) + b"keydata"
    assert check_ipseckey("IPSECKEY", rdata) == len(rdata)


def test_ipseckey_name_gateway():
    rdata = bytes([10, 3, 2]) + NAME + b"keydata"
    assert check_ipseckey("IPSECKEY", rdata) == len(rdata)


def test_ipseckey_no_gateway_no_key():
    rdata = bytes([10, 0, 0])
    assert check_ipseckey("IPSECKEY", rdata) == len(rdata)


def test_ipseckey_errors():
    with pytest.raises(ZoneSyntaxError, match="Invalid IPSECKEY"):
        check_ipseckey("IPSECKEY", bytes([10, 5, 2]) + b"key")
    with pytest.raises(ZoneSyntaxError, match="Trailing data"):
        check_ipseckey("IPSECKEY", bytes([10, 0, 0]) + b"x")
    with pytest.raises(ZoneSyntaxError, match="Missing public key"):
        check_ipseckey("IPSECKEY", bytes([10, 2, 2]) + bytes(16))


def _rrsig(ttl: bytes = b"\x00\x00\x0e\x10") -> bytes:
    return (b"\x00\x01\x08\x02" + ttl + bytes(4) + bytes(4) + b"\x30\x39"
            + NAME + b"signature")


def test_rrsig_accepted_for_sig_and_rrsig():
    rdata = _rrsig()
    assert check_rrsig("RRSIG", rdata) == len(rdata)
    assert check_rrsig("SIG", rdata) == len(rdata)


def test_rrsig_ttl_too_large():
    with pytest.raises(ZoneSemanticError):
        check_rrsig("RRSIG", _rrsig(b"\x80\x00\x00\x00"))


def test_rrsig_truncated_signer():
    with pytest.raises(ZoneSyntaxError):
        check_rrsig("RRSIG", _rrsig()[:20])


def test_nsec_record():
    rdata = NAME + BITMAP
    assert check_nsec_record("NSEC", rdata) == len(rdata)
    with pytest.raises(ZoneSyntaxError, match="out-of-order"):
        check_nsec_record("NSEC", NAME + b"\x01\x01\x40\x00\x01\x40")


def test_dnskey_and_tlsa_require_payload():
    assert check_dnskey("DNSKEY", b"\x01\x01\x03\x08key") == 7
    with pytest.raises(ZoneSyntaxError):
        check_dnskey("DNSKEY", b"\x01\x01\x03\x08")
    assert check_tlsa("TLSA", b"\x03\x01\x01\xaa") == 4
    with pytest.raises(ZoneSyntaxError):
        check_tlsa("SMIMEA", b"\x03\x01\x01")


def test_dhcid_and_openpgpkey_minimum():
    assert check_dhcid("DHCID", b"\x00\x01\x01\xff") == 4
    with pytest.raises(ZoneSemanticError):
        check_dhcid("DHCID", b"\x00\x01\x01")
    assert check_openpgpkey("OPENPGPKEY", b"abcd") == 4
    with pytest.raises(ZoneSyntaxError):
        check_openpgpkey("OPENPGPKEY", b"abc")


def test_nsec3_and_param():
    rdata = b"\x01\x00\x00\x0a\x02\xab\xcd\x14" + bytes(20) + BITMAP
    assert check_nsec3("NSEC3", rdata) == len(rdata)
    with pytest.raises(ZoneSyntaxError):
        check_nsec3("NSEC3", rdata + b"\x00")
    param = b"\x01\x00\x00\x0a\x02\xab\xcd"
    assert check_nsec3param("NSEC3PARAM", param) == len(param)
    with pytest.raises(ZoneSyntaxError):
        check_nsec3param("NSEC3PARAM", param + b"\x00")


def test_csync():
    rdata = b"\x00\x00\x00\x42\x00\x03" + BITMAP
    assert check_csync("CSYNC", rdata) == len(rdata)
    with pytest.raises(ZoneSyntaxError):
        check_csync("CSYNC", b"\x00\x00\x00\x42\x00\x03\x00\x00\x40")


def test_zonemd():
    rdata = b"\x00\x00\x00\x01\x01\x01" + bytes(48)
    assert check_zonemd("ZONEMD", rdata) == len(rdata)
    with pytest.raises(ZoneSemanticError, match="Invalid digest in ZONEMD"):
        check_zonemd("ZONEMD", b"\x00\x00\x00\x01\x01\x02" + bytes(48))


def test_ilnp_records():
    assert check_nid("NID", b"\x00\x0a" + bytes(8)) == 10
    assert check_l64("L64", b"\x00\x0a" + bytes(8)) == 10
    assert check_l32("L32", b"\x00\x0a\x0a\x01\x02\x03") == 6
    with pytest.raises(ZoneSyntaxError):
        check_nid("NID", b"\x00\x0a" + bytes(7))
    with pytest.raises(ZoneSyntaxError):
        check_l32("L32", b"\x00\x0a\x0a\x01\x02\x03\x04")


def test_eui_lengths():
    assert check_eui48("EUI48", bytes(6)) == 6
    assert check_eui64("EUI64", bytes(8)) == 8
    with pytest.raises(ZoneSyntaxError):
        check_eui48("EUI48", bytes(8))
    with pytest.raises(ZoneSyntaxError):
        check_eui64("EUI64", bytes(6))


def test_uri_and_caa():
    uri = b"\x00\x0a\x00\x01ftp://ftp1.example.com/public"
    assert check_uri("URI", uri) == len(uri)
    with pytest.raises(ZoneSyntaxError):
        check_uri("URI", b"\x00\x0a\x00\x01")
    caa = b"\x00\x05issueca.example.net"
    assert check_caa("CAA", caa) == len(caa)
    with pytest.raises(ZoneError):
        check_caa("CAA", b"\x00\x05")


def test_type_given_by_code():
    rdata = b"\x30\x39\x08\x01" + bytes(20)
    assert check_ds(43, rdata) == len(rdata)