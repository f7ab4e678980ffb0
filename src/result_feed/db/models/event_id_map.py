from __future__ import annotations

from sqlalchemy import BigInteger, String
from sqlalchemy.orm import Mapped, mapped_column

from result_feed.db.base import Base


class EventIdMap(Base):
    __tablename__ = "event_id_map"

    event_id: Mapped[int] = mapped_column(BigInteger, primary_key=True, autoincrement=False)
    api_event_id: Mapped[str] = mapped_column(String(64), nullable=False, unique=True)
