"""SQLAlchemy database models."""

from datetime import datetime, timezone

from sqlalchemy import JSON, Column, DateTime, String, Text
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class ProcessDB(Base):
    """SQLAlchemy model for processes table.

    Scalar columns back the list filters; nested parts of the process are
    stored as JSON documents.
    """

    __tablename__ = "processes"

    id = Column(String(50), primary_key=True, index=True)
    case_type = Column(String(10), nullable=False, index=True)
    activity_type = Column(String(30), nullable=False, index=True)
    status = Column(String(30), nullable=False, index=True)

    department = Column(Text, nullable=False, index=True)
    municipality = Column(Text, nullable=False)
    occurred_at = Column(DateTime(timezone=True), nullable=False, index=True)

    narrative = Column(Text, nullable=False)
    location = Column(JSON, nullable=False)
    reporter = Column(JSON, nullable=False)
    details = Column(JSON, nullable=False)
    status_history = Column(JSON, nullable=False, default=list)

    created_by = Column(Text, nullable=False, index=True)
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        index=True,
    )
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
