# Copyright (c) 2014-2015  Sam Maloney.
# License: GPL v2.

"""Fixed bit notation.

Binary to text conversion for any scheme that uses a fixed number of bits
(1 to 8) to encode each character: base16, base32, base64 and any custom
alphabet of at least 2^bits distinct characters."""

import llog

from collections import namedtuple
import logging
from types import MappingProxyType

import consts
import mutil
from bitbuf import BitReader, BitWriter

log = logging.getLogger(__name__)

Resolution = namedtuple("Resolution", ["bits_per_character", "chars",\
    "radix", "right_pad_final_bits", "pad_final_group", "pad_character",\
    "corrected"])

def _valid_chars(chars):
    return type(chars) is str and len(chars) >= 2\
        and len(set(chars)) == len(chars)

def _coerce_bits(bits_per_character):
    try:
        return int(bits_per_character)
    except (TypeError, ValueError):
        return 0

def resolve(bits_per_character, chars=None, right_pad_final_bits=False,\
        pad_final_group=False, pad_character=consts.DEFAULT_PAD_CHARACTER):
    """Returns the Resolution actually usable for the requested settings.

    Invalid settings are corrected rather than rejected; the corrected
    field of the result is True whenever anything had to be changed."""

    corrected = False

    if not _valid_chars(chars):
        chars = consts.DEFAULT_CHARS
        corrected = True

    char_count = len(chars)
    bits = _coerce_bits(bits_per_character)
    if bits != bits_per_character:
        corrected = True

    if bits < consts.MIN_BITS_PER_CHARACTER:
        bits = consts.MIN_BITS_PER_CHARACTER
        corrected = True
    elif bits > consts.MAX_BITS_PER_CHARACTER:
        bits = consts.MAX_BITS_PER_CHARACTER
        corrected = True

    if char_count < 1 << bits:
        # Not enough characters; use the greatest width they can cover.
        bits = consts.MIN_BITS_PER_CHARACTER
        while bits < consts.MAX_BITS_PER_CHARACTER\
                and char_count >= 1 << (bits + 1):
            bits += 1
        corrected = True

    if not pad_character or type(pad_character) is not str:
        pad_character = consts.DEFAULT_PAD_CHARACTER
        corrected = True
    elif len(pad_character) > 1:
        pad_character = pad_character[0]

    return Resolution(bits, chars, 1 << bits, bool(right_pad_final_bits),\
        bool(pad_final_group), pad_character, corrected)

def _build_charmap(chars, radix):
    charmap = {}
    for i in range(radix):
        charmap[chars[i]] = i

    return MappingProxyType(charmap)

class FixedBitNotation(object):
    def __init__(self, bits_per_character, chars=None,\
            right_pad_final_bits=False, pad_final_group=False,\
            pad_character=consts.DEFAULT_PAD_CHARACTER):
        r = resolve(bits_per_character, chars, right_pad_final_bits,\
            pad_final_group, pad_character)

        if r.corrected:
            log.warning("Corrected notation settings (bits_per_character=[{}]"\
                ", chars=[{!r}], pad_character=[{!r}]) to"\
                " (bits_per_character=[{}], chars=[{}], pad_character=[{}])."\
                    .format(bits_per_character, chars, pad_character,\
                        r.bits_per_character, r.chars, r.pad_character))

        self.resolution = r
        self.bits_per_character = r.bits_per_character
        self.chars = r.chars
        self.radix = r.radix
        self.right_pad_final_bits = r.right_pad_final_bits
        self.pad_final_group = r.pad_final_group
        self.pad_character = r.pad_character
        self.corrected = r.corrected

        group_bits = mutil.lcm(self.bits_per_character, consts.BITS_PER_BYTE)
        self.bytes_per_group = group_bits // consts.BITS_PER_BYTE
        self.chars_per_group = group_bits // self.bits_per_character

        self._charmap = _build_charmap(self.chars, self.radix)

    def pad_count(self, byte_count):
        "Pad characters appended when encoding byte_count bytes."

        if not self.pad_final_group:
            return 0

        remainder = byte_count % self.bytes_per_group
        if not remainder:
            return 0

        return self.chars_per_group - mutil.ceil_div(\
            remainder * consts.BITS_PER_BYTE, self.bits_per_character)

    def encoded_length(self, byte_count):
        return mutil.ceil_div(byte_count * consts.BITS_PER_BYTE,\
            self.bits_per_character) + self.pad_count(byte_count)

    def encode(self, data):
        """Encodes data (bytes-like, or str which is first UTF-8 encoded).

        Returns the encoded str."""

        if type(data) is str:
            data = data.encode()
        elif type(data) not in (bytes, bytearray, memoryview):
            raise TypeError(\
                "Cannot encode object of type [{}].".format(type(data)))

        if not data:
            return ""

        if log.isEnabledFor(logging.DEBUG):
            log.debug("Encoding [{}].".format(mutil.hex_string(data)))

        chars = self.chars
        bits_per_character = self.bits_per_character

        reader = BitReader(data)
        result = []

        while reader.bits_left >= bits_per_character:
            result.append(chars[reader.pull_bits(bits_per_character)])

        final_bit_count = reader.bits_left
        if final_bit_count:
            bits = reader.pull_bits(final_bit_count)
            if self.right_pad_final_bits:
                bits <<= bits_per_character - final_bit_count
            result.append(chars[bits])

            result.append(self.pad_character * self.pad_count(len(data)))

        return "".join(result)

    def decode(self, encoded, case_sensitive=True, strict=False):
        """Decodes encoded back into bytes.

        Characters not in the alphabet are skipped, unless strict is True in
        which case None is returned for the whole input."""

        if not encoded or type(encoded) is not str:
            return b""

        encoded = encoded.rstrip(self.pad_character)

        charmap = self._charmap
        bits_per_character = self.bits_per_character
        right_pad_final_bits = self.right_pad_final_bits
        last = len(encoded) - 1

        writer = BitWriter()

        for i, char in enumerate(encoded):
            idx = charmap.get(char)

            if idx is None and not case_sensitive:
                # Not in the alphabet; try the upper, then the lower case form.
                idx = charmap.get(char.upper())
                if idx is None:
                    idx = charmap.get(char.lower())

            if idx is None:
                if strict:
                    if log.isEnabledFor(logging.INFO):
                        log.info("Undecodable character [{!r}] at [{}]."\
                            .format(char, i))
                    return None
                continue

            if i != last:
                writer.push_bits(idx, bits_per_character)
                continue

            bits_needed = writer.bits_needed
            if bits_needed > bits_per_character:
                # Final character cannot complete a byte; keep what it has.
                writer.push_bits(idx, bits_per_character)
                writer.flush()
            elif right_pad_final_bits:
                # Low bits beyond the final byte are padding.
                writer.push_bits(idx, bits_per_character)
                writer.discard()
            else:
                writer.push_bits(idx, bits_needed)

        return writer.getvalue()

    def __repr__(self):
        return "FixedBitNotation(bits_per_character={}, chars={!r},"\
            " right_pad_final_bits={}, pad_final_group={},"\
            " pad_character={!r})".format(self.bits_per_character,\
                self.chars, self.right_pad_final_bits, self.pad_final_group,\
                self.pad_character)
