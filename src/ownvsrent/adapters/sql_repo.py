# src/ownvsrent/adapters/sql_repo.py
from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import Any

from sqlmodel import JSON, Column, Field, Session, SQLModel, create_engine, select

from ownvsrent.domain.ports import SavedScenario


class SavedScenarioRow(SQLModel, table=True):
    __tablename__ = "saved_scenarios"

    id: str = Field(default_factory=lambda: uuid.uuid4().hex, primary_key=True)
    ts: datetime = Field(default_factory=lambda: datetime.now(timezone.utc), index=True)

    name: str = Field(index=True)
    description: str | None = None

    parameters: dict[str, Any] = Field(sa_column=Column(JSON))


def _to_record(row: SavedScenarioRow) -> SavedScenario:
    return {
        "id": row.id,
        "name": row.name,
        "description": row.description,
        "parameters": dict(row.parameters or {}),
        # sqlite hands timestamps back naive; they were written as UTC
        "created_at": (row.ts if row.ts.tzinfo else row.ts.replace(tzinfo=timezone.utc)).isoformat(),
    }


class SqlScenarioRepository:
    def __init__(self, uri: str = "sqlite:///ownvsrent.db"):
        self.engine = create_engine(uri, echo=False)
        SQLModel.metadata.create_all(self.engine)

    def save(
        self,
        name: str,
        parameters: dict[str, Any],
        description: str | None = None,
    ) -> SavedScenario:
        row = SavedScenarioRow(name=name, description=description, parameters=parameters)
        with Session(self.engine) as session:
            session.add(row)
            session.commit()
            session.refresh(row)
            return _to_record(row)

    def get(self, scenario_id: str) -> SavedScenario | None:
        with Session(self.engine) as session:
            row = session.get(SavedScenarioRow, scenario_id)
            return _to_record(row) if row is not None else None

    def list_all(self) -> list[SavedScenario]:
        with Session(self.engine) as session:
            stmt = select(SavedScenarioRow).order_by(SavedScenarioRow.ts)
            return [_to_record(r) for r in session.exec(stmt)]

    def delete(self, scenario_id: str) -> bool:
        with Session(self.engine) as session:
            row = session.get(SavedScenarioRow, scenario_id)
            if row is None:
                return False
            session.delete(row)
            session.commit()
            return True
