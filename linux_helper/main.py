#!/usr/bin/env python3
"""
Application Starter for Linux Helper
====================================

1. Parses arguments and loads settings
2. Configures logging
3. Either prints a page once (--plain) or starts the Textual app
"""

import argparse
import logging
import sys
from typing import Optional, Sequence

from pydantic import ValidationError

from linux_helper.config.settings import load_settings
from linux_helper.content.pages import HOME, PAGE_SLUGS, get_page
from linux_helper.engine.page import PageModel
from linux_helper.exceptions.base import HelperBaseError
from linux_helper.utils.logger import setup_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="linux-helper",
        description="Linux installation, terminal, error and troubleshooting guides.",
    )
    parser.add_argument(
        "page",
        nargs="?",
        choices=PAGE_SLUGS,
        default=None,
        help="Page to open (default: START_PAGE setting, usually 'home')",
    )
    parser.add_argument("-s", "--search", default="", help="Filter records by text")
    parser.add_argument(
        "-e",
        "--expand",
        type=int,
        action="append",
        default=[],
        metavar="ID",
        help="Toggle record ID (repeatable); checks a step on the checklist",
    )
    parser.add_argument(
        "--plain", action="store_true", help="Print the page and exit instead of the TUI"
    )
    parser.add_argument("--log-level", default=None, help="Override LOG_LEVEL")
    return parser


def render_plain(slug: str, query: str, toggles: Sequence[int], console=None) -> Optional[PageModel]:
    """Print one page with the given query and toggles applied."""
    from linux_helper.ui.plain.renderer import PlainRenderer

    renderer = PlainRenderer(console)
    if slug == HOME:
        renderer.render_home()
        return None

    model = PageModel(get_page(slug))
    if query:
        model.set_query(query)
    for record_id in toggles:
        model.toggle(record_id)
    renderer.render_page(model)
    return model


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    overrides = {}
    if args.log_level:
        overrides["log_level"] = args.log_level

    try:
        settings = load_settings(**overrides)
    except HelperBaseError as e:
        print(f"❌ Configuration Error: {e.message}", file=sys.stderr)
        return 1
    except ValidationError as e:
        print(f"❌ Configuration Error: {e}", file=sys.stderr)
        return 1

    setup_logging(settings, console=args.plain)
    slug = args.page or settings.start_page

    if args.plain:
        render_plain(slug, args.search, args.expand)
        return 0

    from linux_helper.ui.textual.app import LinuxHelperApp

    app = LinuxHelperApp(settings=settings, start_page=slug, query=args.search)
    app.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
