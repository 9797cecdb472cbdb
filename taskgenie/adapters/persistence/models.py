"""SQLAlchemy ORM models — maps to PostgreSQL tables."""

from datetime import datetime

from sqlalchemy import JSON, DateTime, Float, Index, Integer, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from taskgenie.adapters.persistence.database import Base


class RoutingResultModel(Base):
    __tablename__ = "routing_results"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    ticket_id: Mapped[int] = mapped_column(Integer, nullable=False)
    primary_role: Mapped[str] = mapped_column(String(50), nullable=False)
    agents_involved: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    handoff_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    confidence: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    recommendations: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    processing_time_ms: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    summary: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )

    __table_args__ = (Index("idx_routing_results_ticket", "ticket_id"),)
