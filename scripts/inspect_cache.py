#!/usr/bin/env python3
"""Inspect the cached sync response of an identity.

Reads the same files a notification handler would, without touching the
network, and prints what it finds.

Usage
-----
::

    python scripts/inspect_cache.py @alice:example.org
    python scripts/inspect_cache.py @alice:example.org --room '!abc:example.org'
    python scripts/inspect_cache.py @alice:example.org --room '!abc:example.org' --event '$ev1'

Options::

    --root DIR           Storage root (default: SYNCCACHE_* env / ~/.cache)
    --room ROOM_ID       Print the derived display name of this room
    --event EVENT_ID     Look up this event in --room
    --account-data       Print cached account data (redacted)
    --json               Dump the whole cached sync response as JSON
    -v, --verbose        Enable debug logging
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

# Allow running from the repo root without installing the package.
_repo = Path(__file__).resolve().parent.parent
_src = _repo / "src"
if _src.is_dir():
    sys.path.insert(0, str(_src))

from pysynccache import SyncCacheConfig, SyncResponseStore  # noqa: E402
from pysynccache._redact import redact_for_log  # noqa: E402


def _section(title: str) -> str:
    line = "=" * 60
    return f"\n{line}\n  {title}\n{line}"


def _room_counts(store: SyncResponseStore) -> list[str]:
    snapshot = store.get_sync_response()
    if snapshot is None:
        return ["  (no cached sync response)"]
    rooms = snapshot.sync_response.rooms
    lines = [
        f"  sync_token: {snapshot.sync_token}",
        f"  next_batch: {snapshot.sync_response.next_batch}",
    ]
    for label, partition in (("join", rooms.join), ("invite", rooms.invite), ("leave", rooms.leave)):
        lines.append(f"  {label}: {len(partition)} room(s)")
        for room_id in sorted(partition):
            lines.append(f"    {room_id}")
    return lines


def main() -> int:
    parser = argparse.ArgumentParser(description="Inspect a cached sync response")
    parser.add_argument("identity", help="User id the cache was opened with")
    parser.add_argument("--root", type=Path, default=None, help="Storage root directory")
    parser.add_argument("--room", default=None, help="Room id to summarize")
    parser.add_argument("--event", default=None, help="Event id to look up (requires --room)")
    parser.add_argument("--account-data", action="store_true", help="Print cached account data")
    parser.add_argument("--json", action="store_true", help="Dump the cached sync response as JSON")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.event and not args.room:
        parser.error("--event requires --room")

    overrides = {"shared_storage_root": args.root} if args.root is not None else {}
    store = SyncResponseStore(SyncCacheConfig.from_env(**overrides))
    paths = store.open(args.identity)

    if args.json:
        snapshot = store.get_sync_response()
        if snapshot is None:
            print("null")
            return 1
        print(snapshot.model_dump_json(by_alias=True, indent=2))
        return 0

    print(_section(f"Cache for {args.identity}"))
    print(f"  payload:  {paths.payload_path}")
    print(f"  metadata: {paths.metadata_path}")
    print("\n".join(_room_counts(store)))

    if args.account_data:
        print(_section("Account data"))
        account_data = store.get_account_data()
        print(json.dumps(redact_for_log(account_data), indent=2, ensure_ascii=False))

    if args.room:
        print(_section(f"Room {args.room}"))
        summary = store.room_summary(args.room)
        print(f"  display_name: {summary.display_name if summary is not None else None}")

        if args.event:
            event = store.event_with_id(args.event, args.room)
            if event is None:
                print(f"  event {args.event}: not found")
                return 1
            print(f"  event {args.event}:")
            print(event.model_dump_json(by_alias=True, indent=2))

    return 0


if __name__ == "__main__":
    sys.exit(main())
