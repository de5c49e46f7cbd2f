"""
Subtask Model
"""
from sqlalchemy import Column, Integer, String, Boolean, DateTime, ForeignKey, false
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from taskboard.database import Base


class Subtask(Base):
    __tablename__ = "subtasks"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    title = Column(String(255), nullable=False)
    is_completed = Column(Boolean, default=False, server_default=false(), nullable=False)
    task_id = Column(Integer, ForeignKey("tasks.id", ondelete="CASCADE"), nullable=False, index=True)
    order = Column(Integer, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    # Relationships
    task = relationship("Task", back_populates="subtasks")
