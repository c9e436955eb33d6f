"""ydict CLI - Look up words in a ydp dictionary.

Usage:
    python -m ydict.main --idx dict100.idx --dat dict100.dat --word house
    python -m ydict.main --suggest "to run" --limit 10
    python -m ydict.main --list 25 --dump-idx words.tsv
"""

import argparse
import logging
import sys
from typing import Optional

from . import config as cfg
from .dictionary import Dictionary
from .schema import RenderMode

MODES = ["cli", "plain", "raw"]


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser with defaults from config.json."""
    parser = argparse.ArgumentParser(
        description="ydict - ydp dictionary reader"
    )
    parser.add_argument(
        "--idx",
        "-i",
        type=str,
        default=cfg.default_idx_path(),
        help="Path to the .idx word table",
    )
    parser.add_argument(
        "--dat",
        "-d",
        type=str,
        default=cfg.default_dat_path(),
        help="Path to the .dat definitions file",
    )
    parser.add_argument(
        "--dump-idx",
        type=str,
        default=cfg.default_idx_dump_path(),
        help="Write the loaded word table to this file (idx, offset, word)",
    )
    parser.add_argument(
        "--word",
        "-w",
        type=str,
        help="Show the definition of WORD",
    )
    parser.add_argument(
        "--index",
        "-n",
        type=int,
        help="Show the definition of entry N",
    )
    parser.add_argument(
        "--suggest",
        "-s",
        type=str,
        help="List words starting with PREFIX",
    )
    parser.add_argument(
        "--limit",
        type=int,
        default=cfg.default_max_suggestions(),
        help=f"Maximum suggestions (default: {cfg.default_max_suggestions()})",
    )
    parser.add_argument(
        "--list",
        type=int,
        metavar="N",
        help="Print the first N entries of the word table",
    )
    parser.add_argument(
        "--mode",
        "-m",
        choices=MODES,
        default=cfg.default_mode(),
        help=f"Output mode (default: {cfg.default_mode()})",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        default=cfg.get_default("verbose", False),
        help="Enable debug logging",
    )
    return parser


def show_entry(dictionary: Dictionary, index: int, mode: str) -> bool:
    """Print one entry in the given mode."""
    entry = dictionary.word_at(index)
    if entry is None:
        print(f"No entry #{index}")
        return False

    print(f"[{index}] {entry.text}")
    print("-" * 60)

    if mode == "raw":
        raw = dictionary.read_raw(index)
        if not raw:
            print("Record read failed.")
            return False
        print(raw.decode("cp1250", errors="replace"))
        return True

    text = dictionary.render(index, RenderMode.from_name(mode) or RenderMode.CLI)
    if not text:
        print("Record read failed.")
        return False
    print(text)
    return True


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    dictionary = Dictionary()
    ok = dictionary.init(args.idx, args.dat, args.dump_idx or None)
    print(f"init() => {'OK' if ok else 'FAIL'}")
    print(dictionary.version())
    if not ok:
        return 1

    status = dictionary.idx_dump_status
    if status.requested:
        print(f"idx dump: {status.path} ({'OK' if status.ok else 'FAIL'})")

    if args.list:
        for i in range(min(args.list, dictionary.word_count())):
            entry = dictionary.word_at(i)
            print(f"  [{i}] datOffset={entry.dat_offset} word=\"{entry.text}\"")

    if args.suggest is not None:
        print(f"\nSuggestions for \"{args.suggest}\":")
        for i in dictionary.suggest(args.suggest, args.limit):
            print(f"  [{i}] {dictionary.word_at(i).text}")

    if args.index is not None:
        print()
        if not show_entry(dictionary, args.index, args.mode):
            return 1

    if args.word is not None:
        print()
        index = dictionary.find_exact(args.word)
        if index < 0:
            print(f"Not found: {args.word}")
            first = dictionary.find_first_with_prefix(args.word)
            if first >= 0:
                print(f"Nearest: {dictionary.word_at(first).text}")
            return 1
        if not show_entry(dictionary, index, args.mode):
            return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
