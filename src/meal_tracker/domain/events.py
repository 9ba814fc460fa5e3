"""Domain events emitted after store changes."""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID


@dataclass(frozen=True)
class ChangeEvent:
    """Describes a committed write to the record store."""

    entity: str
    action: str
    record_id: UUID | None
    occurred_at: datetime = field(default_factory=lambda: datetime.now(tz=UTC))
