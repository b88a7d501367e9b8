"""CLI entry point for unistring (length, graphemes, slice, split, pad, case, compare...)."""
import argparse
import logging
import sys

from unistring import case, codepoints, compose, graphemes, slicing
from unistring.config import LOG_LEVELS, load_config
from unistring.errors import StringError

logger = logging.getLogger(__name__)


def cmd_length(args, cfg):
    print(graphemes.grapheme_count(args.text))
    return 0


def cmd_graphemes(args, cfg):
    print(cfg["join_with"].join(graphemes.to_graphemes(args.text)))
    return 0


def cmd_codepoints(args, cfg):
    print(" ".join(f"U+{codepoints.codepoint_to_int(cp):04X}" for cp in codepoints.text_to_codepoints(args.text)))
    return 0


def cmd_reverse(args, cfg):
    print(case.reverse(args.text))
    return 0


def cmd_slice(args, cfg):
    print(slicing.slice(args.text, args.index, args.length))
    return 0


def cmd_split(args, cfg):
    on = args.on if args.on is not None else cfg["split_on"]
    print(cfg["join_with"].join(compose.split(args.text, on)))
    return 0


def cmd_pad_left(args, cfg):
    pad = args.with_ if args.with_ is not None else cfg["pad_with"]
    print(compose.pad_left(args.text, args.to, pad))
    return 0


def cmd_pad_right(args, cfg):
    pad = args.with_ if args.with_ is not None else cfg["pad_with"]
    print(compose.pad_right(args.text, args.to, pad))
    return 0


def cmd_upper(args, cfg):
    print(case.uppercase(args.text))
    return 0


def cmd_lower(args, cfg):
    print(case.lowercase(args.text))
    return 0


def cmd_capitalise(args, cfg):
    print(case.capitalise(args.text))
    return 0


def cmd_replace(args, cfg):
    print(compose.replace(args.text, args.each, args.with_))
    return 0


def cmd_crop(args, cfg):
    print(compose.crop(args.text, args.before))
    return 0


def cmd_compare(args, cfg):
    print(case.compare(args.a, args.b).name)
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="unistring", description="Grapheme-aware string tools")
    p.add_argument("--config", default=None, help="YAML config (default: $UNISTRING_CONFIG or configs/unistring.yaml)")
    p.add_argument("--log-level", default=None, type=str.upper, choices=LOG_LEVELS)
    sub = p.add_subparsers(dest="cmd", required=True)

    for name, func, help_ in [
        ("length", cmd_length, "Count graphemes"),
        ("graphemes", cmd_graphemes, "List graphemes"),
        ("codepoints", cmd_codepoints, "List codepoints"),
        ("reverse", cmd_reverse, "Reverse grapheme order"),
        ("upper", cmd_upper, "Uppercase"),
        ("lower", cmd_lower, "Lowercase"),
        ("capitalise", cmd_capitalise, "Capitalise first grapheme"),
    ]:
        sp = sub.add_parser(name, help=help_)
        sp.add_argument("text")
        sp.set_defaults(func=func)
    # slice
    sl_p = sub.add_parser("slice", help="Slice by grapheme index")
    sl_p.add_argument("text")
    sl_p.add_argument("index", type=int)
    sl_p.add_argument("length", type=int)
    sl_p.set_defaults(func=cmd_slice)
    # split
    sp_p = sub.add_parser("split", help="Split on a substring")
    sp_p.add_argument("text")
    sp_p.add_argument("--on", default=None)
    sp_p.set_defaults(func=cmd_split)
    # pad
    for name, func in [("pad-left", cmd_pad_left), ("pad-right", cmd_pad_right)]:
        pd_p = sub.add_parser(name, help="Pad to a grapheme length")
        pd_p.add_argument("text")
        pd_p.add_argument("to", type=int)
        pd_p.add_argument("--with", dest="with_", default=None)
        pd_p.set_defaults(func=func)
    # replace
    rp_p = sub.add_parser("replace", help="Replace every occurrence")
    rp_p.add_argument("text")
    rp_p.add_argument("each")
    rp_p.add_argument("with_", metavar="with")
    rp_p.set_defaults(func=cmd_replace)
    # crop
    cr_p = sub.add_parser("crop", help="Drop everything before a substring")
    cr_p.add_argument("text")
    cr_p.add_argument("before")
    cr_p.set_defaults(func=cmd_crop)
    # compare
    cmp_p = sub.add_parser("compare", help="Byte-order comparison (LT/EQ/GT)")
    cmp_p.add_argument("a")
    cmp_p.add_argument("b")
    cmp_p.set_defaults(func=cmd_compare)
    return p


def main(argv=None):
    p = build_parser()
    args = p.parse_args(argv)
    cfg = load_config(args.config)
    logging.basicConfig(level=args.log_level or cfg["log_level"].upper(), format="%(levelname)s %(name)s: %(message)s")
    logger.debug("Running %s", args.cmd)
    try:
        return args.func(args, cfg)
    except StringError as e:
        print(f"unistring {args.cmd}: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
