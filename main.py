"""CLI entrypoint for searching arXiv from the command line."""

from __future__ import annotations

import argparse
import logging
import os
import sys

from dotenv import load_dotenv

from arxiv_client import ArxivAPIError, get_paper, get_recent_papers, search_papers
from formatting import format_paper_detail, format_paper_list
from models import DEFAULT_MAX_RESULTS, MAX_RESULTS_LIMIT, SortKey


def _max_results(raw: str) -> int:
    try:
        value = int(raw)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer: {raw!r}") from exc
    if not 1 <= value <= MAX_RESULTS_LIMIT:
        raise argparse.ArgumentTypeError(f"must be between 1 and {MAX_RESULTS_LIMIT}")
    return value


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line flags."""
    parser = argparse.ArgumentParser(description="Search and retrieve papers from arXiv")
    subparsers = parser.add_subparsers(dest="command", required=True)

    search_parser = subparsers.add_parser(
        "search", help="Search for papers by keyword, author, or category"
    )
    search_parser.add_argument("query", help="Search keywords (e.g. 'transformer attention')")
    search_parser.add_argument("--author", default=None, help="Author name to filter by")
    search_parser.add_argument(
        "--category", default=None, help="arXiv category (e.g. 'cs.AI', 'math.CO')"
    )
    search_parser.add_argument(
        "--max-results",
        type=_max_results,
        default=DEFAULT_MAX_RESULTS,
        help=f"Maximum number of results to return (1-{MAX_RESULTS_LIMIT})",
    )
    search_parser.add_argument(
        "--sort-by",
        choices=[key.value for key in SortKey],
        default=None,
        help="Sort order for results",
    )

    get_parser = subparsers.add_parser("get", help="Show full details for one arXiv paper")
    get_parser.add_argument("arxiv_id", help="arXiv paper ID (e.g. '2301.00001' or '1706.03762')")

    recent_parser = subparsers.add_parser(
        "recent", help="List the most recently submitted papers in a category"
    )
    recent_parser.add_argument("category", help="arXiv category (e.g. 'cs.CL', 'quant-ph')")
    recent_parser.add_argument(
        "--max-results",
        type=_max_results,
        default=DEFAULT_MAX_RESULTS,
        help=f"Maximum number of results to return (1-{MAX_RESULTS_LIMIT})",
    )

    return parser.parse_args(argv)


def run(args: argparse.Namespace) -> str:
    """Execute one subcommand and return the text to print."""
    if args.command == "get":
        paper = get_paper(args.arxiv_id)
        if paper is None:
            return f"No paper found with ID: {args.arxiv_id}"
        return format_paper_detail(paper)

    if args.command == "recent":
        papers = get_recent_papers(args.category, max_results=args.max_results)
        if not papers:
            return f"No recent papers found in category: {args.category}"
        return format_paper_list(papers, f"{len(papers)} recent paper(s) in {args.category}:")

    sort_by = SortKey(args.sort_by) if args.sort_by else None
    papers = search_papers(
        args.query,
        author=args.author,
        category=args.category,
        max_results=args.max_results,
        sort_by=sort_by,
    )
    if not papers:
        return "No papers found matching the query."
    return format_paper_list(papers, f"Found {len(papers)} paper(s):")


def main(argv: list[str] | None = None) -> int:
    """Initialize config and execute the requested command."""
    load_dotenv()
    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(message)s",
    )
    args = parse_args(argv)

    try:
        output = run(args)
    except ArxivAPIError as exc:
        logging.error("arXiv request failed: %s", exc)
        return 1

    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
