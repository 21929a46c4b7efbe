from datetime import datetime
from typing import List, Sequence
from uuid import UUID

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine

from src.provisioning.domain.exceptions import LedgerError
from src.provisioning.domain.label import Label
from src.provisioning.domain.pending_launch import PendingLaunch
from src.provisioning.interfaces.pending_launch_ledger import PendingLaunchLedger

_COLUMNS = "id, label, provider_name, display_name, requested_at"


class SqlPendingLaunchLedger(PendingLaunchLedger):
    """
    Pending launch bookkeeping in a relational table, so launches requested
    before a restart are still counted afterwards.
    Timestamps are stored as ISO-8601 text to stay portable across backends.
    """

    def __init__(self, engine: Engine):
        self.engine = engine
        self.ensure_schema()

    @classmethod
    def from_dsn(cls, dsn: str) -> "SqlPendingLaunchLedger":
        engine = create_engine(dsn, pool_pre_ping=True, future=True)
        return cls(engine)

    def ensure_schema(self) -> None:
        with self.engine.begin() as conn:
            conn.execute(
                text(
                    """
                    CREATE TABLE IF NOT EXISTS pending_launches (
                        id VARCHAR(36) PRIMARY KEY,
                        label TEXT NOT NULL,
                        provider_name TEXT NOT NULL,
                        display_name TEXT NOT NULL,
                        requested_at VARCHAR(64) NOT NULL
                    )
                    """
                )
            )
            conn.execute(
                text(
                    """
                    CREATE INDEX IF NOT EXISTS ix_pending_launches_label
                    ON pending_launches (label)
                    """
                )
            )

    def record(self, launches: Sequence[PendingLaunch]) -> None:
        if not launches:
            return
        with self.engine.begin() as conn:
            conn.execute(
                text(
                    f"""
                    INSERT INTO pending_launches ({_COLUMNS})
                    VALUES (:id, :label, :provider_name, :display_name, :requested_at)
                    """
                ),
                [
                    {
                        "id": str(launch.id),
                        "label": launch.label.name,
                        "provider_name": launch.provider_name,
                        "display_name": launch.display_name,
                        "requested_at": launch.requested_at.isoformat(),
                    }
                    for launch in launches
                ],
            )

    def pending_for(self, label: Label) -> List[PendingLaunch]:
        with self.engine.begin() as conn:
            rows = conn.execute(
                text(
                    f"""
                    SELECT {_COLUMNS}
                    FROM pending_launches
                    WHERE label = :label
                    ORDER BY requested_at ASC, id ASC
                    """
                ),
                {"label": label.name},
            ).fetchall()
        return [self._to_launch(row) for row in rows]

    def count_for(self, label: Label) -> int:
        with self.engine.begin() as conn:
            return conn.execute(
                text("SELECT COUNT(*) FROM pending_launches WHERE label = :label"),
                {"label": label.name},
            ).scalar_one()

    def resolve(self, launch_id: UUID) -> PendingLaunch:
        with self.engine.begin() as conn:
            row = conn.execute(
                text(f"SELECT {_COLUMNS} FROM pending_launches WHERE id = :id"),
                {"id": str(launch_id)},
            ).first()
            if row is None:
                raise LedgerError(f"Unknown pending launch: {launch_id}")
            conn.execute(text("DELETE FROM pending_launches WHERE id = :id"), {"id": str(launch_id)})
        return self._to_launch(row)

    def all(self) -> List[PendingLaunch]:
        with self.engine.begin() as conn:
            rows = conn.execute(
                text(f"SELECT {_COLUMNS} FROM pending_launches ORDER BY requested_at ASC, id ASC")
            ).fetchall()
        return [self._to_launch(row) for row in rows]

    @staticmethod
    def _to_launch(row) -> PendingLaunch:
        return PendingLaunch(
            id=UUID(row.id),
            label=Label(row.label),
            provider_name=row.provider_name,
            display_name=row.display_name,
            requested_at=datetime.fromisoformat(row.requested_at),
        )
