# Copyright (c) 2014-2015  Sam Maloney.
# License: GPL v2.

import llog

import argparse
import logging
import sys
import time

import authenticator
import consts
import mutil
import profiles
from fbnotation import FixedBitNotation

log = logging.getLogger(__name__)

def _build_parser():
    parser = argparse.ArgumentParser(prog="fbn",\
        description="Fixed bit notation encoder/decoder and authenticator"\
            " passcode tool.")
    parser.add_argument("--alphabet",\
        help="Custom alphabet; implies a custom notation (use with --bits).")
    parser.add_argument("--bits", type=int,\
        help="Bits per character (1-8) of a custom notation.")
    parser.add_argument("--caseinsensitive", action="store_true",\
        help="Decode ignoring the case of characters not in the alphabet.")
    parser.add_argument("--code",\
        help="Print the current passcode of the specified base32 secret.")
    parser.add_argument("--decode", action="store_true",\
        help="Decode the input.")
    parser.add_argument("--encode", action="store_true",\
        help="Encode the input.")
    parser.add_argument("--generate-secret", action="store_true",\
        help="Generate a new random base32 authenticator secret.")
    parser.add_argument("--hex", action="store_true",\
        help="Print decoded data as hex instead of raw bytes.")
    parser.add_argument("-i",\
        help="Read file as stdin.")
    parser.add_argument("--issuer",\
        help="Issuer to use with --otpauth and --qrcode.")
    parser.add_argument("-l", dest="logconf",\
        help="Specify alternate logging.ini.")
    parser.add_argument("--otpauth",\
        help="Print the otpauth URI for the specified account name.")
    parser.add_argument("--padchar", default=consts.DEFAULT_PAD_CHARACTER,\
        help="Pad character of a custom notation (default \"=\").")
    parser.add_argument("--padgroup", action="store_true",\
        help="Pad the final group of a custom notation.")
    parser.add_argument("--profile", choices=profiles.PROFILES,\
        default="base32",\
        help="Named notation to use (default base32).")
    parser.add_argument("--qrcode",\
        help="Print the QR code URL for the specified account name.")
    parser.add_argument("--rightpad", action="store_true",\
        help="Right pad the final bits of a custom notation.")
    parser.add_argument("--secret",\
        help="The base32 secret for --verify, --otpauth and --qrcode.")
    parser.add_argument("--size", type=int, default=consts.QR_SIZE,\
        help="QR code size in pixels (default 200).")
    parser.add_argument("--strict", action="store_true",\
        help="Fail instead of skipping undecodable characters.")
    parser.add_argument("--verify",\
        help="Verify the specified passcode against --secret.")

    return parser

def _select_notation(args):
    if args.bits is None and args.alphabet is None:
        return profiles.get_profile(args.profile)

    notation = FixedBitNotation(\
        args.bits if args.bits is not None else 6, args.alphabet,\
        args.rightpad, args.padgroup, args.padchar)

    if notation.corrected:
        print("Warning: using bits_per_character=[{}] with alphabet [{}]."\
            .format(notation.bits_per_character, notation.chars),\
            file=sys.stderr)

    return notation

def _read_input(args):
    if args.i:
        with open(args.i, "rb") as f:
            return f.read()

    return sys.stdin.buffer.read()

def _require_secret(args, option):
    if not args.secret:
        raise authenticator.InvalidSecretError(\
            "--secret is required with {}.".format(option))
    return args.secret

def _run(args):
    if args.generate_secret:
        print(authenticator.generate_secret())
    elif args.code:
        print(authenticator.get_code(args.code, time.time()))
    elif args.verify:
        secret = _require_secret(args, "--verify")
        r = authenticator.verify_code(secret, args.verify)
        print("valid" if r else "invalid")
        return consts.ExitStatus.ok if r else consts.ExitStatus.error
    elif args.otpauth:
        secret = _require_secret(args, "--otpauth")
        print(authenticator.get_otpauth_uri(\
            args.otpauth, secret, args.issuer))
    elif args.qrcode:
        secret = _require_secret(args, "--qrcode")
        print(authenticator.get_qrcode(\
            args.qrcode, secret, args.issuer, args.size))
    elif args.encode:
        notation = _select_notation(args)
        print(notation.encode(_read_input(args)))
    elif args.decode:
        notation = _select_notation(args)
        # Undecodable bytes become U+FFFD, which no alphabet contains.
        text = _read_input(args).decode(errors="replace").strip()
        data = notation.decode(text, not args.caseinsensitive, args.strict)
        if data is None:
            print("Input contains undecodable characters.", file=sys.stderr)
            return consts.ExitStatus.undecodable
        if args.hex:
            print(mutil.hex_string(data))
        else:
            sys.stdout.buffer.write(data)
            sys.stdout.buffer.flush()
    else:
        print("Nothing to do; see --help.", file=sys.stderr)
        return consts.ExitStatus.error

    return consts.ExitStatus.ok

def main(argv=None):
    args = _build_parser().parse_args(argv)

    if args.logconf:
        llog.init(args.logconf, force=True)

    try:
        status = _run(args)
    except authenticator.AuthenticatorError as e:
        log.warning("{}: {}".format(type(e).__name__, e))
        print(str(e), file=sys.stderr)
        status = consts.ExitStatus.error

    return status.value

if __name__ == "__main__":
    sys.exit(main())
