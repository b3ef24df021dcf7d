"""Command line entry point: render every scheme in an input file."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from levelschemer.parser import SchemeParseError, parse_file
from levelschemer.renderer import render_to_pdf, render_to_svg

DEFAULT_INPUT = "../input.txt"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="levelschemer",
        description="Render nuclear level schemes to PDF and SVG.",
    )
    parser.add_argument(
        "input", nargs="?", default=DEFAULT_INPUT,
        help=f"scheme description file (default: {DEFAULT_INPUT})",
    )
    parser.add_argument(
        "-o", "--output-dir", default=".",
        help="directory for scheme_N.pdf and scheme_N.svg (default: current)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    try:
        schemes = parse_file(args.input)
    except OSError as exc:
        print(f"Failed to open input file: {args.input} ({exc.strerror})", file=sys.stderr)
        return 1
    except SchemeParseError as exc:
        print(f"{args.input}: {exc}", file=sys.stderr)
        return 1

    out_dir = Path(args.output_dir)
    for number, scheme in enumerate(schemes, start=1):
        pdf_path = out_dir / f"scheme_{number}.pdf"
        svg_path = out_dir / f"scheme_{number}.svg"
        render_to_pdf(scheme, pdf_path)
        render_to_svg(scheme, svg_path)
        print(f"Saved {pdf_path} and {svg_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())