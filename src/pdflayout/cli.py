"""Command-line entry point.

    pdflayout figures paper.pdf 3 --index 0
    pdflayout outline paper.pdf
    pdflayout read paper.pdf --section "Introduction,Results"
    pdflayout search paper.pdf 2 "attention is all you need"

Pages are 1-based. Structured output is printed as JSON.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys

from pdflayout.core.errors import PageOutOfRange, PdfLayoutError
from pdflayout.layout.coords import clip_to_page
from pdflayout.layout.figures import detect_figures, figure_by_index
from pdflayout.reader import highlight_rects, read_pages
from pdflayout.utils.io import open_source

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog="pdflayout", description="PDF layout analysis")
    p.add_argument("--backend", default="pymupdf", help="PDF backend name")
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    sub = p.add_subparsers(dest="command", required=True)

    fig = sub.add_parser("figures", help="Detect figure regions on a page")
    fig.add_argument("pdf")
    fig.add_argument("page", type=int)
    fig.add_argument("--padding", type=float, default=0.0, help="Context padding (pt)")
    fig.add_argument("--index", type=int, help="Only the figure with this index")

    out = sub.add_parser("outline", help="Print the document outline")
    out.add_argument("pdf")

    read = sub.add_parser("read", help="Print the text of pages or sections")
    read.add_argument("pdf")
    group = read.add_mutually_exclusive_group(required=True)
    group.add_argument("--pages", help="e.g. '1-5', '1,3,5' or 'all'")
    group.add_argument("--section", help="e.g. 'Introduction,Methods'")

    search = sub.add_parser("search", help="Highlight rects for text on a page")
    search.add_argument("pdf")
    search.add_argument("page", type=int)
    search.add_argument("text")

    return p.parse_args(argv)


def _figures(args: argparse.Namespace) -> object:
    with open_source(args.pdf, args.backend) as source:
        total = source.page_count()
        if not 1 <= args.page <= total:
            raise PageOutOfRange(args.page, total)
        page_width, page_height = source.page_bounds(args.page - 1)
        figures = detect_figures(source, args.page - 1)
    if args.index is not None:
        figures = [figure_by_index(figures, args.index)]

    result = []
    for figure in figures:
        rect = figure.padded(args.padding) if args.padding else figure.rect
        result.append(
            {
                **figure.model_dump(mode="json"),
                "rect": rect.as_list(),
                "description": figure.figure_type.description,
                "width": figure.width,
                "height": figure.height,
                "clip": clip_to_page(rect, page_width, page_height).as_list(),
            }
        )
    return result


def _outline(args: argparse.Namespace) -> object:
    with open_source(args.pdf, args.backend) as source:
        return source.outline().model_dump(mode="json")


def _search(args: argparse.Namespace) -> object:
    with open_source(args.pdf, args.backend) as source:
        rects = highlight_rects(source, args.page, args.text)
    return {"text": args.text, "page": args.page, "rects": [r.as_list() for r in rects]}


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.command == "read":
            with open_source(args.pdf, args.backend) as source:
                print(read_pages(source, pages=args.pages, section=args.section))
            return 0

        handlers = {"figures": _figures, "outline": _outline, "search": _search}
        print(json.dumps(handlers[args.command](args), indent=2))
    except (PdfLayoutError, FileNotFoundError, KeyError) as exc:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
