"""Generation of known-answer test files for the KEM."""

import argparse
import sys

from .kem import PRIMITIVE, dec, enc, keypair
from .rng import AesCtrDrbg

KAT_SUCCESS = 0
KAT_FILE_OPEN_ERROR = -1
KAT_CRYPTO_FAILURE = -4

_DEFAULT_COUNT = 100


def format_bstr(label, data):
    """Return a line of label followed by data in upper-case hex."""
    data = bytes(data)
    return f"{label}{data.hex().upper() if data else '00'}\n"


def generate(count, req, rsp):
    """Write count request entries to req and their answers to rsp."""
    drbg = AesCtrDrbg(bytes(range(48)))
    seeds = [drbg.randombytes(48) for _ in range(count)]

    for i, seed in enumerate(seeds):
        req.write(f"count = {i}\n")
        req.write(format_bstr("seed = ", seed))
        req.write("pk =\nsk =\nct =\nss =\n\n")

    rsp.write(f"# kem/{PRIMITIVE}\n\n")

    for i, seed in enumerate(seeds):
        source = AesCtrDrbg(seed)
        rsp.write(f"count = {i}\n")
        rsp.write(format_bstr("seed = ", seed))

        pk, sk = keypair(source.randombytes)
        rsp.write(format_bstr("pk = ", pk))
        rsp.write(format_bstr("sk = ", sk))

        ct, ss = enc(pk, source.randombytes)
        rsp.write(format_bstr("ct = ", ct))
        rsp.write(format_bstr("ss = ", ss))
        rsp.write("\n")

        if dec(ct, sk) != ss:
            raise RuntimeError("decapsulation returned a different session key")


def main(argv=None):
    """Write known-answer request and response files; return the exit status."""
    parser = argparse.ArgumentParser(
        description="Generate known-answer test files for the KEM."
    )
    parser.add_argument("req", help="path of the request file to write")
    parser.add_argument("rsp", help="path of the response file to write")
    parser.add_argument(
        "-n",
        "--count",
        type=int,
        default=_DEFAULT_COUNT,
        help="number of test vectors",
    )
    args = parser.parse_args(argv)
    if args.count < 0:
        parser.error("count must be non-negative")

    try:
        with open(args.req, "w") as req, open(args.rsp, "w") as rsp:
            generate(args.count, req, rsp)
    except OSError as exc:
        print(f"cannot write output: {exc}", file=sys.stderr)
        return KAT_FILE_OPEN_ERROR
    except RuntimeError as exc:
        print(exc, file=sys.stderr)
        return KAT_CRYPTO_FAILURE
    return KAT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())