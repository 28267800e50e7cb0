"""
State Stores

Durable homes for the engine snapshot. A store hands back None when there
is nothing usable to restore, so the engine starts fresh instead of failing.
"""

import json
from pathlib import Path
from typing import Any, Dict, Optional

from pymongo.mongo_client import MongoClient
from pymongo.server_api import ServerApi

from ..config.app_config import Config
from ..utils.game_logger import game_logger


class StateStore:
    """Interface shared by all stores."""

    def load(self) -> Optional[Dict[str, Any]]:
        raise NotImplementedError

    def save(self, snapshot: Dict[str, Any]) -> None:
        raise NotImplementedError


class MemoryStateStore(StateStore):
    """Keeps the snapshot in process memory (tests, throwaway sessions)."""

    def __init__(self, snapshot: Optional[Dict[str, Any]] = None):
        self.snapshot = snapshot

    def load(self) -> Optional[Dict[str, Any]]:
        return json.loads(json.dumps(self.snapshot)) if self.snapshot is not None else None

    def save(self, snapshot: Dict[str, Any]) -> None:
        self.snapshot = json.loads(json.dumps(snapshot))


class JsonFileStateStore(StateStore):
    """Stores the snapshot as a JSON document on disk."""

    def __init__(self, path):
        self.path = Path(path)

    def load(self) -> Optional[Dict[str, Any]]:
        if not self.path.exists():
            return None
        try:
            with self.path.open('r', encoding='utf-8') as f:
                return json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            game_logger.logger.warning(f"Ignoring unreadable state file {self.path}: {e}")
            return None

    def save(self, snapshot: Dict[str, Any]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_suffix(self.path.suffix + '.tmp')
        with tmp_path.open('w', encoding='utf-8') as f:
            json.dump(snapshot, f, indent=2, ensure_ascii=False)
        tmp_path.replace(self.path)


class MongoStateStore(StateStore):
    """
    Stores one snapshot document per player in MongoDB.

    Args:
        mongo_uri: MongoDB connection string
        database: Database name
        player_id: Key of the snapshot document
        client: Pre-built client, mainly for tests
    """

    def __init__(self, mongo_uri: str = None, database: str = 'dailyword', player_id: str = 'local',
                 client=None):
        self.player_id = player_id
        self.client = client or MongoClient(mongo_uri, server_api=ServerApi('1'))
        self.collection = self.client[database].game_states

    def load(self) -> Optional[Dict[str, Any]]:
        document = self.collection.find_one({"_id": self.player_id})
        if document is None:
            return None
        snapshot = document.get("snapshot")
        if not isinstance(snapshot, dict):
            game_logger.logger.warning(f"Ignoring malformed state document for player {self.player_id}")
            return None
        return snapshot

    def save(self, snapshot: Dict[str, Any]) -> None:
        self.collection.replace_one(
            {"_id": self.player_id},
            {"_id": self.player_id, "snapshot": snapshot},
            upsert=True
        )


def create_state_store(config_class=Config) -> StateStore:
    """Builds the store selected by STATE_BACKEND."""
    backend = config_class.STATE_BACKEND
    if backend == 'memory':
        return MemoryStateStore()
    if backend == 'file':
        return JsonFileStateStore(config_class.STATE_FILE)
    if backend == 'mongo':
        if not config_class.MONGO_URI:
            raise ValueError("STATE_BACKEND=mongo requires MONGO_URI")
        return MongoStateStore(config_class.MONGO_URI, config_class.MONGO_DATABASE, config_class.PLAYER_ID)
    raise ValueError(f"Unknown state backend: {backend!r}")
