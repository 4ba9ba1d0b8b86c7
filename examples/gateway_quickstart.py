#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
import json
import logging

from metagenie.client import ClientError, InMemoryEnvironment, MetaGenieAPI, StorageScope
from metagenie.client.config import TEAM_CONTEXT_STORAGE_KEY


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Call the MetaGenie API through the request gateway")
    p.add_argument("limit", nargs="?", type=int, default=5, help="Recent posts to fetch")
    p.add_argument("--team", default=None, help="Team id to scope requests to")
    p.add_argument("--page", default="http://localhost:5173/create", help="Simulated page URL")
    p.add_argument("--debug", action="store_true")
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    logging.basicConfig(level=logging.DEBUG if args.debug else logging.INFO)

    env = InMemoryEnvironment(url=args.page)
    if args.team:
        env.write(StorageScope.LOCAL, TEAM_CONTEXT_STORAGE_KEY, json.dumps({"team_id": args.team}))

    # Base URLs come from METAGENIE_API_URL / METAGENIE_PLATFORM_URL (or .env)
    async with MetaGenieAPI(environment=env) as api:
        try:
            recent = await api.posts.recent(limit=args.limit)
            print(json.dumps(recent.data, indent=2))
        except ClientError as e:
            print(f"Request failed: {type(e).__name__}: {e}")

    if env.navigations:
        print("Redirected to login:", env.navigations[-1])


if __name__ == "__main__":
    asyncio.run(main())
