from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest

from pysynccache.config import SyncCacheConfig
from pysynccache.models.sync import CachedSyncResponse
from pysynccache.store import SyncResponseStore

USER_ID = "@alice:example.org"
ROOM_ID = "!room:example.org"


def make_event(event_id: str, event_type: str, content: dict[str, Any] | None = None, **extra: Any) -> dict[str, Any]:
    event: dict[str, Any] = {
        "event_id": event_id,
        "type": event_type,
        "sender": "@bob:example.org",
        "content": content or {},
        "origin_server_ts": 1_700_000_000_000,
    }
    event.update(extra)
    return event


def sample_payload() -> dict[str, Any]:
    return {
        "sync_token": "s100_1",
        "sync_response": {
            "next_batch": "s101_2",
            "rooms": {
                "join": {
                    ROOM_ID: {
                        "state": {
                            "events": [
                                make_event("$create", "m.room.create", {"creator": "@bob:example.org"}, state_key=""),
                            ]
                        },
                        "timeline": {
                            "events": [
                                make_event("$msg1", "m.room.message", {"msgtype": "m.text", "body": "hello"}),
                            ],
                            "limited": False,
                            "prev_batch": "p1",
                        },
                        "account_data": {"events": [{"type": "m.tag", "content": {"tags": {}}}]},
                        "unread_notifications": {"highlight_count": 0, "notification_count": 1},
                    }
                },
                "invite": {},
                "leave": {},
            },
            "account_data": {"events": []},
            "device_one_time_keys_count": {"signed_curve25519": 50},
        },
    }


def sample_snapshot() -> CachedSyncResponse:
    return CachedSyncResponse.model_validate(sample_payload())


@pytest.fixture
def config(tmp_path: Path) -> SyncCacheConfig:
    return SyncCacheConfig(shared_storage_root=tmp_path)


@pytest.fixture
def store(config: SyncCacheConfig) -> SyncResponseStore:
    opened = SyncResponseStore(config)
    opened.open(USER_ID)
    return opened
