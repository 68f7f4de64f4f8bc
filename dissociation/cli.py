"""Command-line interface for plotting dissociation diagrams."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .diagram import build_diagram, render_diagram, species_at_pka
from .errors import InvalidArgument
from .plotting.style import sanitize_filename

logger = logging.getLogger(__name__)


def _build_arg_parser() -> argparse.ArgumentParser:
    """Build command-line parser for module execution."""
    parser = argparse.ArgumentParser(
        description="Plot the dissociation diagram of a mono- to tetraprotic acid."
    )
    parser.add_argument(
        "pka",
        nargs="+",
        type=float,
        help="One to four pKa values in ascending order.",
    )
    parser.add_argument(
        "-c",
        "--concentration",
        type=float,
        default=None,
        help="Total analytical concentration in mol dm^-3 (default: 0.1).",
    )
    parser.add_argument(
        "--title",
        default=None,
        help="Acid name used as plot title (default: based on pKa count).",
    )
    parser.add_argument(
        "--outdir",
        default=None,
        help="Write PNG, PDF and SVG files to this directory instead of showing.",
    )
    parser.add_argument(
        "--show",
        action="store_true",
        help="Display the figure even when --outdir is given.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint for building and rendering one dissociation diagram."""
    parser = _build_arg_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    try:
        diagram = build_diagram(args.pka, args.concentration, args.title)
    except InvalidArgument as exc:
        parser.error(str(exc))

    logger.info(
        "%s: %d pKa values, C = %g M",
        diagram.title,
        diagram.acid.n_steps,
        diagram.concentration,
    )
    table = species_at_pka(diagram).round(3)
    logger.info(
        "log10 species concentrations at each pKa:\n%s", table.to_string(index=False)
    )

    savepath = None
    if args.outdir:
        savepath = Path(args.outdir) / sanitize_filename(diagram.title)

    render_diagram(diagram, savepath=savepath, show=args.show or savepath is None)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
