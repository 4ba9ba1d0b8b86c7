#!/usr/bin/env python3
from __future__ import annotations

import argparse
import sys

from metagenie.client.chunking import (
    THREADS_POST_MAX_CHARS,
    caption_limit_for,
    estimate_thread_posts,
    parse_generated_segments,
    split_by_limit,
)


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Split long text into Threads-sized posts")
    p.add_argument("path", nargs="?", help="Text file to split (stdin if omitted)")
    p.add_argument("limit", nargs="?", type=int, default=THREADS_POST_MAX_CHARS)
    p.add_argument(
        "--generated",
        action="store_true",
        help="Treat input as AI output (--- separators, numbered lists, paragraphs)",
    )
    return p.parse_args()


def main() -> None:
    args = parse_args()
    if args.path:
        with open(args.path, encoding="utf-8") as fh:
            text = fh.read()
    else:
        text = sys.stdin.read()

    if args.generated:
        posts = parse_generated_segments(text, limit=args.limit)
    else:
        posts = split_by_limit(text, args.limit)

    print("=" * 65)
    print(f"Characters     : {len(text)}")
    print(f"Estimated posts: {estimate_thread_posts(text, args.limit)}")
    print(f"Actual posts   : {len(posts)}")
    print(f"Threads limit  : {caption_limit_for(['threads'])}")
    print("=" * 65)
    for i, post in enumerate(posts, start=1):
        print(f"[{i}/{len(posts)}] ({len(post)} chars)")
        print(post)
        print("-" * 65)


if __name__ == "__main__":
    main()
