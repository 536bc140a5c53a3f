import copy
import uuid
from datetime import datetime, timezone
from typing import Any

from ownvsrent.domain.ports import SavedScenario, ScenarioRepository


class InMemoryScenarioRepository(ScenarioRepository):
    def __init__(self) -> None:
        self._items: dict[str, SavedScenario] = {}

    def save(
        self,
        name: str,
        parameters: dict[str, Any],
        description: str | None = None,
    ) -> SavedScenario:
        rec: SavedScenario = {
            "id": uuid.uuid4().hex,
            "name": name,
            "description": description,
            "parameters": copy.deepcopy(parameters),
            "created_at": datetime.now(timezone.utc).isoformat(),
        }
        self._items[rec["id"]] = rec
        return copy.deepcopy(rec)

    def get(self, scenario_id: str) -> SavedScenario | None:
        rec = self._items.get(scenario_id)
        return copy.deepcopy(rec) if rec is not None else None

    def list_all(self) -> list[SavedScenario]:
        return [copy.deepcopy(r) for r in self._items.values()]

    def delete(self, scenario_id: str) -> bool:
        return self._items.pop(scenario_id, None) is not None
