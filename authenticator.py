# Copyright (c) 2014-2015  Sam Maloney.
# License: GPL v2.

"""Time based one time passcodes (RFC 6238) compatible with authenticator
apps, with secrets in base32."""

import llog

import hmac
from hashlib import sha1
import logging
import os
import struct
import time as _time
from urllib.parse import quote

import base32
import consts

log = logging.getLogger(__name__)

PIN_MODULO = 10 ** consts.PASSCODE_LENGTH
MAX_COUNTER = 0xFFFFFFFF

class AuthenticatorError(Exception):
    pass

class InvalidAccountNameError(AuthenticatorError):
    """Raised when an account name is empty or contains a colon."""
    pass

class InvalidIssuerError(AuthenticatorError):
    """Raised when an issuer is empty or contains a colon."""
    pass

class InvalidSecretError(AuthenticatorError):
    pass

class InvalidTimeError(AuthenticatorError):
    """Raised when a time step does not fit the unsigned 32 bit counter."""
    pass

def _encode_component(val):
    # Same reserved set as JavaScript's encodeURIComponent().
    return quote(val, safe="!~*'()")

def _check_label_part(val, error_class, what):
    if not val or ':' in val:
        raise error_class("Invalid {} [{!r}].".format(what, val))

def _counter(time):
    counter = int(time // consts.CODE_PERIOD)
    if counter < 0 or counter > MAX_COUNTER:
        raise InvalidTimeError(\
            "Time [{}] is outside the passcode counter range.".format(time))
    return counter

def generate_secret():
    "Returns a new random secret, base32 encoded."
    return base32.encode(os.urandom(consts.SECRET_LENGTH))

def decode_secret(secret):
    key = base32.decode(secret, case_sensitive=False)
    if not key:
        raise InvalidSecretError("Secret [{!r}] is empty.".format(secret))
    return key

def get_code(secret, time):
    """Returns the passcode for the time step containing time.

    secret is the raw key, or a base32 encoded str of it."""

    if type(secret) is str:
        secret = decode_secret(secret)

    counter = _counter(time)
    msg = struct.pack(">LL", 0, counter)

    digest = hmac.new(secret, msg, sha1).digest()

    offset = digest[-1] & 0x0F
    truncated = struct.unpack_from(">L", digest, offset)[0] & 0x7FFFFFFF

    return str(truncated % PIN_MODULO).zfill(consts.PASSCODE_LENGTH)

def verify_code(secret, code, for_time=None):
    "Accepts the code of the current, previous or next time step."

    if type(code) is not str or len(code) != consts.PASSCODE_LENGTH:
        return False

    key = decode_secret(secret) if type(secret) is str else secret

    if for_time is None:
        for_time = _time.time()
    for_time = int(for_time)

    for step in (0, -1, 1):
        step_time = for_time + step * consts.CODE_PERIOD
        if not 0 <= step_time // consts.CODE_PERIOD <= MAX_COUNTER:
            continue

        expected = get_code(key, step_time)
        if hmac.compare_digest(code.encode(), expected.encode()):
            if step and log.isEnabledFor(logging.INFO):
                log.info("Accepted code from time step offset [{}]."\
                    .format(step))
            return True

    return False

def get_otpauth_uri(account_name, secret, issuer=None):
    """Returns the otpauth:// URI for an authenticator app.

    When issuer is given it prefixes the label as well as being passed as a
    parameter, as Google recommends."""

    _check_label_part(account_name, InvalidAccountNameError, "account name")
    if not secret:
        raise InvalidSecretError("Secret must not be empty.")

    label = account_name
    params = "?secret=" + _encode_component(secret)

    if issuer is not None:
        _check_label_part(issuer, InvalidIssuerError, "issuer")
        label = issuer + ':' + label
        params += "&issuer=" + _encode_component(issuer)

    return consts.OTPAUTH_PREFIX + _encode_component(label) + params

def get_qrcode(account_name, secret, issuer=None, size=consts.QR_SIZE):
    "Returns a URL of a size x size QR code image of the otpauth URI."

    uri = get_otpauth_uri(account_name, secret, issuer)

    return "{}?chs={}x{}&chld=M|0&cht=qr&chl={}".format(\
        consts.QR_CHART_URL, size, size, _encode_component(uri))
