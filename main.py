"""CLI entrypoint for the crossword word placer."""

from __future__ import annotations

import argparse
import io
import json
import logging
from pathlib import Path
from typing import List

from crossgrid.core.exceptions import GridShapeError
from crossgrid.data.vocabulary import Vocabulary
from crossgrid.engine.placer import PlacerConfig, WordPlacer
from crossgrid.utils.logger import configure_logging
from crossgrid.utils.pretty import print_placement_stats


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Arrange words on a grid so every word crosses another",
    )
    parser.add_argument("--size", type=int, help="Square grid size (sets height and width)")
    parser.add_argument("--height", type=int, help="Grid height in cells")
    parser.add_argument("--width", type=int, help="Grid width in cells")
    parser.add_argument(
        "--words",
        nargs="+",
        metavar="WORD",
        help="Words to place; they also form the vocabulary for crossings",
    )
    parser.add_argument(
        "--words-file",
        type=Path,
        metavar="FILE",
        help="File with one word per line (# comments and blank lines ignored)",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility")
    parser.add_argument(
        "--format",
        type=str,
        choices=["json", "text"],
        default="json",
        help="Output format",
    )
    parser.add_argument("--output", type=Path, help="Optional path to write the output to")
    parser.add_argument(
        "--no-audit",
        action="store_true",
        help="Skip the integrity audit of the finished grid",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    level = getattr(logging, args.log_level.upper(), logging.INFO)
    configure_logging(level)

    if args.size is not None and (args.height is not None or args.width is not None):
        parser.error("--size cannot be combined with --height / --width")
    height = args.size if args.size is not None else args.height
    width = args.size if args.size is not None else args.width
    if height is None or width is None:
        parser.error("provide --size or both --height and --width")
    if not args.words and not args.words_file:
        parser.error("provide at least --words or --words-file")

    words: List[str] = []
    if args.words:
        words.extend(args.words)
    if args.words_file:
        words.extend(Vocabulary.from_file(args.words_file))

    try:
        placer = WordPlacer(
            PlacerConfig(height=height, width=width, seed=args.seed, audit=not args.no_audit)
        )
    except GridShapeError as exc:
        parser.error(str(exc))
    result = placer.place_words(words)

    if args.format == "text":
        buffer = io.StringIO()
        print_placement_stats(result, stream=buffer)
        output_text = buffer.getvalue()
    else:
        output_text = json.dumps(result.to_jsonable(), ensure_ascii=False, indent=2)

    if args.output:
        args.output.write_text(output_text, encoding="utf-8")
    else:
        print(output_text)


if __name__ == "__main__":  # pragma: no cover
    main()
