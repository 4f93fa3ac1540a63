"""
Blog Dashboard CLI
==================

Terminal access to the same read-only views as the API.

Usage:
    blog-dashboard list [--status active] [--health risk] [--query example]
    blog-dashboard export --format csv --output snapshot.csv
    blog-dashboard check example.com
"""

from __future__ import annotations
from dataclasses import replace
from typing import List, Optional
import argparse
import asyncio
import sys

from .config import DashboardConfig
from .capabilities import run_all_checks
from .contracts.base import AssetType, BlogStatus, HealthLevel
from .derivation import (
    ALL, ViewFilter, build_snapshot, derive_view, snapshot_to_csv, snapshot_to_json,
)
from .domain.serialization import dumps_pretty
from .observability import setup_logger
from .storage import CatalogueLoader


def cmd_list(catalogue, args) -> int:
    view_filter = ViewFilter.from_params(status=args.status, health=args.health, query=args.query)
    view = derive_view(catalogue.blogs, view_filter)

    if not view:
        print("No blogs match the current filters.")
        return 0

    print("| Name | Domain | Status | Health | Critical | Important | Optional |")
    print("| :--- | :--- | :--- | :--- | ---: | ---: | ---: |")
    for blog, health in view:
        print(
            f"| {blog.display_name} | `{blog.domain}` | {blog.status.value} | "
            f"{health.level.value} | {health.missing.critical} | "
            f"{health.missing.important} | {health.missing.optional} |"
        )
    print(f"\n{len(view)} of {len(catalogue.blogs)} blogs shown.")
    return 0


def cmd_export(catalogue, args) -> int:
    snapshots = build_snapshot(catalogue.blogs)
    if args.format == "csv":
        body = snapshot_to_csv(snapshots, quote_fields=args.quote)
    else:
        body = snapshot_to_json(snapshots)

    if args.output:
        with open(args.output, 'w', encoding='utf-8') as f:
            f.write(body)
        print(f"[+] Wrote {len(snapshots)} snapshot records to {args.output}")
    else:
        print(body)
    return 0


def cmd_check(catalogue, args, config: DashboardConfig) -> int:
    blog = catalogue.find_blog(args.blog_id)
    if blog is None:
        print(f"[!] No blog with ID: {args.blog_id}", file=sys.stderr)
        return 1

    production_urls = [a.url for a in blog.assets_of_type(AssetType.PRODUCTION_SITE) if a.url]
    report = asyncio.run(run_all_checks(
        blog.domain,
        production_urls[0] if production_urls else None,
        timeout=config.http_timeout,
    ))
    print(dumps_pretty(report))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="blog-dashboard",
        description="Read-only blog factory status board",
    )
    parser.add_argument("--source", default=None,
                        help="Catalogue file path or URL (default: $BLOG_DASHBOARD_DATA or data/blogs.json)")

    subparsers = parser.add_subparsers(dest="command")

    list_parser = subparsers.add_parser("list", help="Show blogs ordered by severity")
    list_parser.add_argument("--status", default=ALL,
                             choices=[ALL] + [s.value for s in BlogStatus])
    list_parser.add_argument("--health", default=ALL,
                             choices=[ALL] + [h.value for h in HealthLevel])
    list_parser.add_argument("--query", default="", help="Domain substring (case-insensitive)")

    export_parser = subparsers.add_parser("export", help="Export a snapshot")
    export_parser.add_argument("--format", choices=["json", "csv"], default="json")
    export_parser.add_argument("--output", default=None, help="File to write (default: stdout)")
    export_parser.add_argument("--quote", action="store_true",
                               help="Quote CSV values containing delimiters")

    check_parser = subparsers.add_parser("check", help="Run capability probes for one blog")
    check_parser.add_argument("blog_id")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    config = DashboardConfig.from_env()
    if args.source:
        config = replace(config, data_source=args.source)
    setup_logger(level=config.log_level)

    result = CatalogueLoader(config).load()
    if result.is_failure:
        print(f"[!] Error loading data: {result.error.message}", file=sys.stderr)
        return 1
    catalogue = result.value

    if args.command == "list":
        return cmd_list(catalogue, args)
    if args.command == "export":
        return cmd_export(catalogue, args)
    return cmd_check(catalogue, args, config)


if __name__ == "__main__":
    sys.exit(main())
