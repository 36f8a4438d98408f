"""Scenario persistence keyed by owner (one scenario per owner, upsert)."""

import json
import logging
import os
import tempfile
from datetime import datetime, timezone

from engine.models import ScenarioInput

logger = logging.getLogger(__name__)


class ScenarioStoreError(Exception):
    """Raised when a scenario cannot be read or written."""


def _check_owner(owner_id):
    if not owner_id:
        raise ValueError("owner_id is required")


class ScenarioStore:
    """Interface: load(owner_id) -> ScenarioInput | None, save(owner_id, inp) -> None."""

    def load(self, owner_id):
        raise NotImplementedError

    def save(self, owner_id, inp):
        raise NotImplementedError


class InMemoryScenarioStore(ScenarioStore):
    def __init__(self):
        self._rows = {}

    def load(self, owner_id):
        _check_owner(owner_id)
        row = self._rows.get(owner_id)
        return ScenarioInput.from_dict(row) if row is not None else None

    def save(self, owner_id, inp):
        _check_owner(owner_id)
        self._rows[owner_id] = inp.to_dict()


class JsonFileScenarioStore(ScenarioStore):
    """
    All scenarios in one JSON document:

        {"<owner_id>": {"scenario": {...}, "updated_at": "<iso timestamp>"}}

    Writes go through a temp file and os.replace so a crash never leaves a
    half-written document. Concurrent writers: last write wins.
    """

    def __init__(self, path):
        self.path = path

    def _read_all(self):
        if not os.path.exists(self.path):
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as fh:
                data = json.load(fh)
        except (OSError, ValueError) as exc:
            logger.exception("Error reading scenarios from %s", self.path)
            raise ScenarioStoreError(f"Could not read {self.path}: {exc}") from exc
        if not isinstance(data, dict):
            raise ScenarioStoreError(f"{self.path} does not contain a scenario map")
        return data

    def load(self, owner_id):
        _check_owner(owner_id)
        record = self._read_all().get(owner_id)
        if record is None:
            return None
        logger.info("Loaded scenario for %s (updated %s)", owner_id, record.get("updated_at"))
        try:
            return ScenarioInput.from_dict(record.get("scenario", {}))
        except (TypeError, ValueError, OverflowError) as exc:
            raise ScenarioStoreError(f"Stored scenario for {owner_id} is malformed: {exc}") from exc

    def save(self, owner_id, inp):
        _check_owner(owner_id)
        data = self._read_all()
        data[owner_id] = {
            "scenario": inp.to_dict(),
            "updated_at": datetime.now(timezone.utc).isoformat(),
        }

        directory = os.path.dirname(os.path.abspath(self.path))
        try:
            os.makedirs(directory, exist_ok=True)
            fd, tmp = tempfile.mkstemp(dir=directory, suffix=".tmp")
        except OSError as exc:
            logger.exception("Error saving scenario for %s", owner_id)
            raise ScenarioStoreError(f"Could not write {self.path}: {exc}") from exc

        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                json.dump(data, fh, indent=2, sort_keys=True)
            os.replace(tmp, self.path)
        except BaseException as exc:
            if os.path.exists(tmp):
                os.unlink(tmp)
            if isinstance(exc, (OSError, TypeError, ValueError)):
                logger.exception("Error saving scenario for %s", owner_id)
                raise ScenarioStoreError(f"Could not write {self.path}: {exc}") from exc
            raise
        logger.info("Saved scenario for %s", owner_id)
