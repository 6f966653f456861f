#!/usr/bin/env python3

# Print the TCAM entries that represent the range START <= v <= END.
#
# With -optimize, assume the action is accept and compare the number of entries of
#   1. START:END (accept)
#   2. [0 ... START-1] (reject) followed by [0 ... END] (accept)
# then print the smaller one.

import argparse
import logging
import sys

from tcam_range.lookup import CheckFailed, boundary_mismatches
from tcam_range.optimize import choose_best_encoding
from tcam_range.parse import parse_bound
from tcam_range.split_range import MAX_ENTRIES, DecomposeError, decompose
from tcam_range.table_entries import DEFAULT_TABLE, FORMATS, render

log = logging.getLogger("range2masks")


def positive_int(text):
    value = int(text)
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1: {text}")
    return value


def build_parser():
    parser = argparse.ArgumentParser(
        prog="range2masks",
        description="Convert a 32-bit range into TCAM pattern/mask entries.")

    parser.add_argument("start", help="start of the range: decimal, 0x hex or IPv4 address")
    parser.add_argument("end", help="end of the range (inclusive), same forms as start")
    parser.add_argument("-optimize", "--optimize", action="store_true",
                        help="also try the reject [0, start-1] + accept [0, end] form and keep the smaller")
    parser.add_argument("-f", "--format", choices=FORMATS, default="raw", help="output format")
    parser.add_argument("-o", "--output", default="-", help="path to the output file, - for stdout")
    parser.add_argument("--max-entries", type=positive_int, default=MAX_ENTRIES,
                        help="maximum number of entries per rule set")
    parser.add_argument("--table", default=DEFAULT_TABLE, help="table name for the table format")
    parser.add_argument("--check", action="store_true",
                        help="look up the values around both ends of the range before printing")
    parser.add_argument("-v", "--verbose", action="store_true", help="log debug messages")
    return parser


def run(args):
    start = parse_bound(args.start)
    end = parse_bound(args.end)
    log.debug("range %d (%#x) - %d (%#x)", start, start, end, end)

    if args.optimize:
        result = choose_best_encoding(start, end, args.max_entries)
        log.debug("chose %s form with %d entries",
                  "split" if result.is_split else "direct", result.total)
    else:
        result = decompose(start, end, args.max_entries)
        log.debug("%d entries", len(result))

    if args.check:
        bad = boundary_mismatches(result, start, end)
        if bad:
            raise CheckFailed("entries disagree with the range at {}".format(
                ", ".join(str(k) for k in bad)))
        log.debug("lookup check passed")

    return render(result, args.format, table=args.table)


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(name)s: %(levelname)s: %(message)s")

    try:
        lines = run(args)
    except (DecomposeError, CheckFailed) as e:
        log.error("%s", e)
        return 1

    if args.output == "-":
        for line in lines:
            print(line)
        return 0

    log.debug("write output to %s", args.output)
    try:
        with open(args.output, "w") as f:
            for line in lines:
                f.write(line + "\n")
    except OSError as e:
        log.error("cannot write %s: %s", args.output, e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
