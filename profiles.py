# Copyright (c) 2014-2015  Sam Maloney.
# License: GPL v2.

import llog

import logging

import consts
from fbnotation import FixedBitNotation

log = logging.getLogger(__name__)

# name: (bits_per_character, chars, right_pad_final_bits, pad_final_group).
_settings = {
    "base16": (4, consts.BASE16_CHARS, False, False),
    "base32": (5, consts.BASE32_CHARS, True, True),
    "base32hex": (5, consts.BASE32HEX_CHARS, True, True),
    "zbase32": (5, consts.ZBASE32_CHARS, True, False),
    "base64": (6, consts.BASE64_CHARS, True, True),
    "base64url": (6, consts.BASE64URL_CHARS, True, False),
    "default": (6, consts.DEFAULT_CHARS, False, False),
}

PROFILES = tuple(sorted(_settings))

_cache = {}

def get_profile(name):
    "Returns the shared FixedBitNotation for the named profile."

    notation = _cache.get(name)
    if notation is not None:
        return notation

    settings = _settings.get(name)
    if settings is None:
        raise KeyError("Unknown profile [{}]; known profiles are: {}."\
            .format(name, ", ".join(PROFILES)))

    notation = FixedBitNotation(*settings)
    # Racing builders produce equal notations; the first stored one wins.
    notation = _cache.setdefault(name, notation)

    if log.isEnabledFor(logging.DEBUG):
        log.debug("Profile [{}] is [{}].".format(name, notation))

    return notation
