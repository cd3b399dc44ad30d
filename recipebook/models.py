from sqlalchemy import Column, DateTime, Integer, Text, func
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class Recipe(Base):
    __tablename__ = "recipes"
    __table_args__ = {"sqlite_autoincrement": True}
    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False)
    ingredients = Column(Text, nullable=False)  # one per line
    instructions = Column(Text, nullable=False)  # one per line
    prep_time = Column(Integer, nullable=True)
    created_at = Column(DateTime, server_default=func.current_timestamp())
