from __future__ import annotations

import pytest

import authenticator
import consts
from authenticator import (
    AuthenticatorError,
    InvalidAccountNameError,
    InvalidIssuerError,
    InvalidSecretError,
    InvalidTimeError,
)

RFC6238_KEY = b"12345678901234567890"
RFC6238_SECRET = "GEZDGNBVGY3TQOJQGEZDGNBVGY3TQOJQ"
NOW = 1234567890


def test_generate_secret():
    secret = authenticator.generate_secret()
    assert len(secret) == 16
    assert set(secret) <= set(consts.BASE32_CHARS)
    assert len(authenticator.decode_secret(secret)) == consts.SECRET_LENGTH


def test_generate_secret_encodes_random_bytes(monkeypatch):
    monkeypatch.setattr(authenticator.os, "urandom", lambda n: bytes(range(n)))
    assert authenticator.generate_secret() == "AAAQEAYEAUDAOCAJ"


def test_decode_secret():
    assert authenticator.decode_secret(RFC6238_SECRET) == RFC6238_KEY
    assert authenticator.decode_secret(RFC6238_SECRET.lower()) == RFC6238_KEY
    with pytest.raises(InvalidSecretError):
        authenticator.decode_secret("!!!!")


@pytest.mark.parametrize(
    "for_time, code",
    [
        (59, "287082"),
        (1111111109, "081804"),
        (1111111111, "050471"),
        (1234567890, "005924"),
        (2000000000, "279037"),
    ],
)
def test_rfc6238_vectors(for_time, code):
    assert authenticator.get_code(RFC6238_KEY, for_time) == code
    assert authenticator.get_code(RFC6238_SECRET, for_time) == code


@pytest.mark.parametrize("offset", [0, -30, 30])
def test_verify_accepts_adjacent_steps(offset):
    code = authenticator.get_code(RFC6238_KEY, NOW + offset)
    assert authenticator.verify_code(RFC6238_SECRET, code, for_time=NOW)
    assert authenticator.verify_code(RFC6238_KEY, code, for_time=NOW)


@pytest.mark.parametrize("offset", [-60, 60])
def test_verify_rejects_distant_steps(offset):
    code = authenticator.get_code(RFC6238_KEY, NOW + offset)
    assert not authenticator.verify_code(RFC6238_SECRET, code, for_time=NOW)


def test_verify_current_time():
    import time

    code = authenticator.get_code(RFC6238_KEY, time.time())
    assert authenticator.verify_code(RFC6238_SECRET, code)


@pytest.mark.parametrize("code", ["", "12345", "1234567", None, 5924])
def test_verify_rejects_wrong_length(code):
    assert not authenticator.verify_code(RFC6238_SECRET, code, for_time=NOW)


def test_otpauth_uri():
    uri = authenticator.get_otpauth_uri("John.Doe@gmail.com", "JBSWY3DPEHPK3PXP")
    assert uri == "otpauth://totp/John.Doe%40gmail.com?secret=JBSWY3DPEHPK3PXP"


def test_otpauth_uri_with_issuer():
    uri = authenticator.get_otpauth_uri("John Doe", "JBSWY3DPEHPK3PXP", "Acme inc")
    assert uri == (
        "otpauth://totp/Acme%20inc%3AJohn%20Doe"
        "?secret=JBSWY3DPEHPK3PXP&issuer=Acme%20inc"
    )


def test_qrcode():
    url = authenticator.get_qrcode("John_Doe_976", "JBSWY3DPEHPK3PXP", size=300)
    assert url == (
        "https://chart.googleapis.com/chart?chs=300x300&chld=M|0&cht=qr&chl="
        "otpauth%3A%2F%2Ftotp%2FJohn_Doe_976%3Fsecret%3DJBSWY3DPEHPK3PXP"
    )


@pytest.mark.parametrize("account_name", ["john:doe", ""])
def test_rejects_bad_account_name(account_name):
    with pytest.raises(InvalidAccountNameError):
        authenticator.get_qrcode(account_name, "JBSWY3DPEHPK3PXP")


@pytest.mark.parametrize("issuer", ["", "Acme:inc"])
def test_rejects_bad_issuer(issuer):
    with pytest.raises(InvalidIssuerError):
        authenticator.get_qrcode("john", "JBSWY3DPEHPK3PXP", issuer)


def test_rejects_empty_secret():
    with pytest.raises(InvalidSecretError):
        authenticator.get_otpauth_uri("john", "")


def test_errors_share_base_class():
    for error_class in (
        InvalidAccountNameError,
        InvalidIssuerError,
        InvalidSecretError,
        InvalidTimeError,
    ):
        assert issubclass(error_class, AuthenticatorError)


@pytest.mark.parametrize("for_time", [-1, 30 * (1 << 32)])
def test_get_code_rejects_counter_out_of_range(for_time):
    with pytest.raises(InvalidTimeError):
        authenticator.get_code(RFC6238_KEY, for_time)


def test_verify_near_epoch_skips_previous_step():
    code = authenticator.get_code(RFC6238_KEY, 10)
    assert authenticator.verify_code(RFC6238_SECRET, code, for_time=10)
    # Step -1 would be a negative counter; it is skipped, not raised.
    r = authenticator.verify_code(RFC6238_SECRET, "000000", for_time=10)
    assert isinstance(r, bool)


def test_verify_at_end_of_counter_range():
    last = 30 * (1 << 32) - 1
    code = authenticator.get_code(RFC6238_KEY, last)
    assert authenticator.verify_code(RFC6238_SECRET, code, for_time=last)
