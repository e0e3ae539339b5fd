# Copyright (c) 2014-2015  Sam Maloney.
# License: GPL v2.

"""MSB first bit accumulators.

BitReader pulls fixed width groups of bits out of a byte buffer and
BitWriter pushes them back into bytes. All the byte boundary spanning
arithmetic of the notation codecs lives here."""

import llog

import logging

import mutil

log = logging.getLogger(__name__)

class BitReader(object):
    def __init__(self, data):
        assert type(data) in (bytes, bytearray, memoryview), type(data)

        self.data = data
        self.position = 0 # In bits.
        self.bit_count = len(data) << 3

    @property
    def bits_left(self):
        return self.bit_count - self.position

    def pull_bits(self, width):
        "Returns the next width bits as an unsigned int."

        if width < 0:
            raise ValueError("Invalid width [{}].".format(width))
        if width > self.bits_left:
            raise ValueError(\
                "Requested [{}] bits but only [{}] remain."\
                    .format(width, self.bits_left))

        value = 0

        while width:
            byte = self.data[self.position >> 3]
            available = 8 - (self.position & 7)
            take = min(available, width)

            # Drop the bits already read (high) and those not needed (low).
            chunk = (byte >> (available - take)) & ((1 << take) - 1)
            value = (value << take) | chunk

            self.position += take
            width -= take

        return value

    def __repr__(self):
        return "BitReader(position={}, bit_count={})"\
            .format(self.position, self.bit_count)

class BitWriter(object):
    def __init__(self):
        self.buf = bytearray()
        self.acc = 0
        self.pending = 0 # Bits in acc not yet written out as a byte.

    @property
    def bits_needed(self):
        "Bits still needed to complete the current byte."
        return 8 - self.pending

    def push_bits(self, value, width):
        "Appends the low width bits of value; returns bytes completed."

        if width < 0:
            raise ValueError("Invalid width [{}].".format(width))

        self.acc = (self.acc << width) | (value & ((1 << width) - 1))
        self.pending += width

        completed = 0
        while self.pending >= 8:
            self.pending -= 8
            self.buf.append(self.acc >> self.pending)
            self.acc &= (1 << self.pending) - 1
            completed += 1

        return completed

    def flush(self):
        "Writes out any pending bits as a byte, zero filled on the right."

        if not self.pending:
            return

        self.buf.append((self.acc << (8 - self.pending)) & 0xff)
        self.discard()

    def discard(self):
        "Drops any pending bits."

        if self.pending and log.isEnabledFor(logging.DEBUG):
            log.debug("Discarding [{}] pending bits [{}]."\
                .format(self.pending,\
                    mutil.bin_string(bytes([self.acc << (8 - self.pending)]))\
                        [:self.pending]))

        self.acc = 0
        self.pending = 0

    def getvalue(self):
        return bytes(self.buf)

    def __len__(self):
        return len(self.buf)

    def __repr__(self):
        return "BitWriter(len={}, pending={})"\
            .format(len(self.buf), self.pending)
