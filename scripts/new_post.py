#!/usr/bin/env python3
# scripts/new_post.py

from __future__ import annotations
import argparse
from datetime import date
from pathlib import Path
import sys
from typing import List, Optional

import yaml

from site_core.constants import CONTENT_DIR, BLOG_SUBDIR, DEFAULT_LANGUAGE
from site_core.utils import slugify

BODY_TEMPLATE = """# {title}

A short introduction.

## Section

- Point 1
- Point 2
"""


def build_post(title: str, lang: str, tags: List[str], read_time: str, post_date: str) -> dict:
    """Returns the YAML document of a new post with a single locale."""
    return {
        "skills": tags,
        "content": {
            lang: {
                "title": title,
                "date": post_date,
                "read_time": read_time,
                "tags": tags,
                "preview": "",
                "body": BODY_TEMPLATE.format(title=title),
            }
        },
    }


def main(argv: Optional[List[str]] = None, blog_dir: Path = CONTENT_DIR / BLOG_SUBDIR) -> int:
    parser = argparse.ArgumentParser(description="Create a new blog post scaffold.")
    parser.add_argument("title", help="The title of the post, e.g., 'DevOps Is My Gym'")
    parser.add_argument("--lang", default=DEFAULT_LANGUAGE, help="Locale of the first version (default: %(default)s)")
    parser.add_argument("--tag", action="append", default=[], help="A tag; repeat for several")
    parser.add_argument("--read-time", default="5 min", help="Displayed reading time")
    parser.add_argument("--date", default=date.today().isoformat(), help="Publication date, YYYY-MM-DD")
    args = parser.parse_args(argv)

    post_slug = slugify(args.title)
    if not post_slug:
        print("Error: Could not generate a valid slug from the provided title.")
        return 1

    target = blog_dir / f"{post_slug}.yaml"
    if target.exists():
        print(f"Error: Post '{target}' already exists.")
        return 1

    if args.lang != DEFAULT_LANGUAGE:
        print(f"Warning: posts need a '{DEFAULT_LANGUAGE}' version to be published; add it before deploying.")

    blog_dir.mkdir(parents=True, exist_ok=True)
    document = build_post(args.title, args.lang, args.tag, args.read_time, args.date)
    target.write_text(yaml.safe_dump(document, allow_unicode=True, sort_keys=False), encoding="utf-8")

    print(f"Scaffold created at: {target}")
    return 0

if __name__ == "__main__":
    sys.exit(main())
