"""Team model."""

from datetime import datetime

from sqlalchemy import Column, DateTime, Integer, String, Text, func

from app.database import Base


class Team(Base):
    """Team database model, keyed by the football-data.org id."""

    __tablename__ = "teams"

    id = Column(Integer, primary_key=True, autoincrement=False)
    name = Column(String(255), nullable=False)
    short_name = Column(String(100), nullable=True)
    tla = Column(String(10), nullable=True)
    crest = Column(String(500), nullable=True)
    venue = Column(String(255), nullable=True)
    founded = Column(Integer, nullable=True)
    address = Column(Text, nullable=True)
    website = Column(String(500), nullable=True)
    club_colors = Column(String(255), nullable=True)

    # Metadata
    created_at = Column(DateTime, default=datetime.utcnow, server_default=func.current_timestamp())
    updated_at = Column(DateTime, default=datetime.utcnow, server_default=func.current_timestamp())

    def __repr__(self) -> str:
        return f"<Team {self.id}: {self.name}>"


teams_table = Team.__table__
