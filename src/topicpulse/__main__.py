"""CLI entry-point: ``python -m topicpulse analyze`` / ``python -m topicpulse keywords``."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from topicpulse import config
from topicpulse.ingest import IngestError, load_csv
from topicpulse.keywords import top_keywords
from topicpulse.models import AnalysisReport, FilterCriteria
from topicpulse.pipeline import run_pipeline
from topicpulse.taxonomy import TaxonomyError

logger = logging.getLogger(__name__)


def _setup_logging() -> None:
    logging.basicConfig(
        level=config.LOG_LEVEL,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _print_report(report: AnalysisReport) -> None:
    print(f"Showing {len(report.filtered)} of {len(report.labeled)} posts")
    print()
    print("Topics")
    for stat in report.stats:
        print(f"  {stat.name:<30} {stat.count:>6}  avg engagement {stat.avg_engagement}")

    summary = report.summary
    print()
    print(f"Average engagement: {summary.avg_engagement:.1f}")
    for level, count in summary.level_distribution.items():
        print(f"  {level:<12} {count:>6}")

    if report.top_posts:
        print()
        print("Top posts")
        for item in report.top_posts:
            title = item.post.link_title or item.post.post_message or ""
            print(f"  [{item.engagement.raw:>7}] {item.post.id}: {title[:80]}")

    if report.keywords:
        print()
        print("Keywords: " + ", ".join(report.keywords))


def _analyze(args: argparse.Namespace) -> None:
    criteria = FilterCriteria(title=args.title, message=args.message, topic=args.topic)
    export_to = args.export
    if export_to is True:
        export_to = config.export_path(f"{args.csv.stem}-filtered")
    report = run_pipeline(
        csv_path=args.csv,
        criteria=criteria,
        export_to=export_to,
        top_n=args.top,
    )
    _print_report(report)


def _keywords(args: argparse.Namespace) -> None:
    posts = load_csv(args.csv)
    for word in top_keywords(posts, args.limit):
        print(word)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="topicpulse",
        description="Topic labeling and engagement stats for social-media posts.",
    )
    sub = parser.add_subparsers(dest="command")

    # ── analyze ────────────────────────────────────────────────────────
    analyze_parser = sub.add_parser("analyze", help="Label, filter and summarise a CSV of posts.")
    analyze_parser.add_argument("csv", type=Path, help="CSV file with one post per row.")
    analyze_parser.add_argument("--title", default="", help="Keep posts whose title contains this text.")
    analyze_parser.add_argument("--message", default="", help="Keep posts whose message contains this text.")
    analyze_parser.add_argument(
        "--topic",
        default="all",
        help="Keep posts assigned to this topic id (default: all).",
    )
    analyze_parser.add_argument(
        "--export",
        type=Path,
        nargs="?",
        const=True,
        default=None,
        help=(
            "Write the filtered posts, with derived fields, to this CSV. "
            "Without a path, writes <stem>-filtered.csv under TOPICPULSE_OUTPUT_DIR."
        ),
    )
    analyze_parser.add_argument(
        "--top",
        type=int,
        default=config.TOP_POSTS,
        help=f"How many top posts to list (default: {config.TOP_POSTS}).",
    )

    # ── keywords ──────────────────────────────────────────────────────
    keywords_parser = sub.add_parser("keywords", help="Print the most frequent keywords in a CSV.")
    keywords_parser.add_argument("csv", type=Path, help="CSV file with one post per row.")
    keywords_parser.add_argument(
        "--limit",
        type=int,
        default=config.KEYWORD_LIMIT,
        help=f"Maximum keywords to print (default: {config.KEYWORD_LIMIT}).",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    _setup_logging()
    try:
        if args.command == "analyze":
            _analyze(args)
        elif args.command == "keywords":
            _keywords(args)
    except (FileNotFoundError, IngestError, TaxonomyError) as exc:
        logger.error("%s", exc)
        sys.exit(1)


if __name__ == "__main__":
    main()
