# Copyright (c) 2014-2015  Sam Maloney.
# License: GPL v2.

from math import gcd

def hex_string(val):
    if val is None:
        return None

    buf = ""

    for b in val:
        if b <= 0x0F:
            buf += '0'
        buf += hex(b)[2:]

    return buf

def bin_string(val):
    if val is None:
        return None

    buf = ""

    for b in val:
        for i in range(7, -1, -1):
            if b & 1 << i:
                buf += '1'
            else:
                buf += '0'

    return buf

def lcm(a, b):
    return a * b // gcd(a, b)

def ceil_div(a, b):
    return -(-a // b)
