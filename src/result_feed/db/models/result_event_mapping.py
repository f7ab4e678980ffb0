from __future__ import annotations

from datetime import datetime

from sqlalchemy import BigInteger, Boolean, DateTime, Index, String, false
from sqlalchemy.orm import Mapped, mapped_column

from result_feed.db.base import Base


class ResultEventMapping(Base):
    """Settlement state for one bettable event.

    Rows are seeded open (completed=False, no score/outcome) and are written at most
    once by result ingestion. A completed row is terminal until explicitly reset.
    """

    __tablename__ = "result_event_mapping"

    event_id: Mapped[int] = mapped_column(BigInteger, primary_key=True, autoincrement=False)
    api_event_id: Mapped[str] = mapped_column(String(64), nullable=False, unique=True)
    comp_type: Mapped[str] = mapped_column(String(64), nullable=False)

    completed: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False, server_default=false()
    )
    outcome: Mapped[str | None] = mapped_column(String(2), nullable=True)
    score: Mapped[str | None] = mapped_column(String(16), nullable=True)
    last_updated_dt: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )

    __table_args__ = (
        Index("ix_result_event_mapping_completed", "completed"),
        Index("ix_result_event_mapping_comp_type", "comp_type"),
    )

    def __repr__(self) -> str:
        return (
            f"ResultEventMapping(event_id={self.event_id!r}, api_event_id={self.api_event_id!r}, "
            f"completed={self.completed!r}, outcome={self.outcome!r}, score={self.score!r})"
        )
