#!/usr/bin/env python3
# scripts/validate_content.py

"""
Checks the content files before deployment.

Every project and post must parse, have a unique id and carry a record for the
default locale. Images and the resumes named in site.yaml must exist under the
assets directory. Exits with status 1 and lists the defects otherwise.

Usage:
    python scripts/validate_content.py
    python scripts/validate_content.py --content-dir content --default-locale en
"""
from __future__ import annotations
import argparse
import logging
from pathlib import Path
import sys
from typing import List, Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from site_core.constants import ASSETS_DIR, CONFIG_DIR, CONTENT_DIR, DEFAULT_LANGUAGE
from site_core.logger_config import configure_app_logging
from site_core.services import load_site_config, validate_catalog

console = Console()


def print_report(problems: List[str]) -> None:
    """Prints the defects as a numbered table."""
    console.print(f"[bold red]Found {len(problems)} problem(s):[/bold red]")
    table = Table(show_header=True, header_style="bold", box=None)
    table.add_column("#", style="dim", justify="right")
    table.add_column("Problem", style="red", overflow="fold")
    for number, problem in enumerate(problems, start=1):
        table.add_row(str(number), escape(problem))
    console.print(table)


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Validate portfolio content files.")
    parser.add_argument("--content-dir", type=Path, default=CONTENT_DIR, help="Directory holding the content YAML files")
    parser.add_argument("--config-dir", type=Path, default=CONFIG_DIR, help="Directory holding site.yaml")
    parser.add_argument("--assets-dir", type=Path, default=ASSETS_DIR, help="Directory images and resumes are resolved against")
    parser.add_argument("--default-locale", default=None, help="Locale every item must provide (default: from site.yaml)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every skipped record while scanning")
    args = parser.parse_args(argv)

    if args.verbose:
        configure_app_logging(level=logging.DEBUG)

    if not args.content_dir.is_dir():
        console.print(f"[bold red]FATAL:[/bold red] content directory '{escape(str(args.content_dir))}' not found.")
        return 1

    site_config = load_site_config(args.config_dir)
    default_locale = args.default_locale or site_config.i18n.default or DEFAULT_LANGUAGE
    problems = validate_catalog(args.content_dir, default_locale,
                                assets_dir=args.assets_dir, resources=site_config.resources)
    if problems:
        print_report(problems)
        return 1

    console.print("[green]Content OK.[/green]")
    return 0

if __name__ == "__main__":
    sys.exit(main())
