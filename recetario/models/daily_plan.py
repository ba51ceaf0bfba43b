"""
Recetario API - Daily Plan ORM Models.

DailyPlan groups the recipes a user schedules for one calendar day.
"""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, UniqueConstraint, Index
from sqlalchemy.orm import relationship

from recetario.database import Base


class DailyPlan(Base):
    """
    DailyPlan model.

    One plan per user and UTC calendar day; ``date`` is stored as UTC
    midnight. The calorie total is derived from the entries on every read
    and never persisted.

    Attributes:
        id: Numeric identifier.
        date: UTC midnight of the planned day.
        user_id: Foreign key to User.
    """

    __tablename__ = "daily_plans"
    __table_args__ = (
        UniqueConstraint("user_id", "date", name="uq_daily_plans_user_date"),
        Index("ix_daily_plans_user_id", "user_id"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    date = Column(DateTime(timezone=True), nullable=False)
    user_id = Column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False
    )

    # Relationships
    user = relationship("User", back_populates="daily_plans")
    entries = relationship(
        "PlanEntry",
        back_populates="plan",
        cascade="all, delete-orphan",
        order_by="PlanEntry.id"
    )

    @property
    def total_calories(self) -> int:
        """Sum of the kcal of every scheduled recipe."""
        return sum(entry.recipe.kcal for entry in self.entries)

    def __repr__(self) -> str:
        """String representation of DailyPlan."""
        return f"<DailyPlan(id={self.id}, user_id={self.user_id}, date={self.date})>"


class PlanEntry(Base):
    """A recipe scheduled in a daily plan. Counts the recipe's kcal once."""

    __tablename__ = "plan_entries"
    __table_args__ = (
        Index("ix_plan_entries_plan_id", "plan_id"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    plan_id = Column(
        Integer,
        ForeignKey("daily_plans.id", ondelete="CASCADE"),
        nullable=False
    )
    recipe_id = Column(
        Integer,
        ForeignKey("recipes.id", ondelete="CASCADE"),
        nullable=False
    )

    plan = relationship("DailyPlan", back_populates="entries")
    recipe = relationship("Recipe", back_populates="plan_entries")

    def __repr__(self) -> str:
        return f"<PlanEntry(id={self.id}, plan_id={self.plan_id}, recipe_id={self.recipe_id})>"
