# Copyright (c) 2014-2015  Sam Maloney.
# License: GPL v2.

from enum import Enum

MIN_BITS_PER_CHARACTER = 1
MAX_BITS_PER_CHARACTER = 8
BITS_PER_BYTE = 8

DEFAULT_CHARS = "0123456789abcdefghijklmnopqrstuvwxyz"\
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ-,"
DEFAULT_PAD_CHARACTER = '='

BASE16_CHARS = "0123456789ABCDEF"
BASE32_CHARS = "ABCDEFGHIJKLMNOPQRSTUVWXYZ234567"
BASE32HEX_CHARS = "0123456789ABCDEFGHIJKLMNOPQRSTUV"
ZBASE32_CHARS = "ybndrfg8ejkmcpqxot1uwisza345h769"
BASE64_CHARS = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"\
    "0123456789+/"
BASE64URL_CHARS = BASE64_CHARS[:62] + "-_"

CODE_PERIOD = 30 # seconds.
PASSCODE_LENGTH = 6 # digits.
SECRET_LENGTH = 10 # bytes.
QR_SIZE = 200 # pixels.

OTPAUTH_PREFIX = "otpauth://totp/"
QR_CHART_URL = "https://chart.googleapis.com/chart"

class ExitStatus(Enum):
    ok = 0
    error = 1
    undecodable = 2
