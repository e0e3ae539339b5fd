# Copyright (c) 2014-2015  Sam Maloney.
# License: GPL v2.

"""RFC 4648 base32, as used for authenticator secrets."""

import profiles

notation = profiles.get_profile("base32")

def encode(val):
    return notation.encode(val)

def decode(val, case_sensitive=True, strict=False):
    return notation.decode(val, case_sensitive, strict)
