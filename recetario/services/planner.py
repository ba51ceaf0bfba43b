"""
Recetario API - Daily Planner Service.

Daily plans are keyed by (user, UTC calendar day). Today's plan is created on
first access with an atomic insert-if-absent, so concurrent requests for the
same day end up with a single row.
"""

from datetime import date, datetime
from typing import List, Optional, Tuple
import logging

from sqlalchemy import func, select
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, selectinload

from recetario.database import is_storable_id
from recetario.models import DailyPlan, PlanEntry, Recipe
from recetario.services.calorie_history import DailyCalories, DayRange, aggregate
from recetario.utils.dates import utc_midnight, utc_today
from recetario.utils.errors import NotFoundError, StoreError

logger = logging.getLogger(__name__)

# Dialects supporting INSERT ... ON CONFLICT DO NOTHING
_CONFLICT_FREE_INSERTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


def _find_plan(db: Session, user_id: int, plan_date: datetime) -> Optional[DailyPlan]:
    stmt = (
        select(DailyPlan)
        .where(DailyPlan.user_id == user_id, DailyPlan.date == plan_date)
        .options(selectinload(DailyPlan.entries).selectinload(PlanEntry.recipe))
    )
    return db.scalars(stmt).first()


def get_or_create_plan(db: Session, user_id: int, day: date) -> DailyPlan:
    """
    Return the user's plan for ``day``, creating it if absent.

    Repeated or concurrent calls for the same (user, day) return the same
    plan.

    Raises:
        StoreError: If the plan can be neither inserted nor found.
    """
    plan_date = utc_midnight(day)
    dialect = db.get_bind().dialect.name
    insert = _CONFLICT_FREE_INSERTS.get(dialect)

    try:
        if insert is not None:
            stmt = (
                insert(DailyPlan)
                .values(user_id=user_id, date=plan_date)
                .on_conflict_do_nothing(index_elements=["user_id", "date"])
            )
            db.execute(stmt)
            db.commit()
        elif _find_plan(db, user_id, plan_date) is None:
            db.add(DailyPlan(user_id=user_id, date=plan_date))
            try:
                db.commit()
            except IntegrityError:
                # Another request created it first
                db.rollback()
                logger.info(f"Daily plan for user {user_id} on {day} created concurrently")
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Failed to create daily plan for user {user_id} on {day}: {e}")
        raise StoreError("Error loading daily plan") from e

    plan = _find_plan(db, user_id, plan_date)
    if plan is None:
        logger.error(f"Daily plan for user {user_id} on {day} missing after insert")
        raise StoreError("Error loading daily plan")
    return plan


def get_or_create_today(db: Session, user_id: int, now: Optional[datetime] = None) -> DailyPlan:
    """Today's (UTC) plan for the user."""
    return get_or_create_plan(db, user_id, utc_today(now))


def add_entry(db: Session, user_id: int, plan_id: int, recipe_id: int) -> PlanEntry:
    """
    Schedule a recipe in one of the user's plans.

    Raises:
        NotFoundError: If the plan is not the user's or the recipe does not exist.
        StoreError: If the insert fails.
    """
    plan = db.get(DailyPlan, plan_id) if is_storable_id(plan_id) else None
    if plan is None or plan.user_id != user_id:
        raise NotFoundError("Plan not found or does not belong to the user")

    recipe = db.get(Recipe, recipe_id) if is_storable_id(recipe_id) else None
    if recipe is None:
        raise NotFoundError("Recipe not found")

    entry = PlanEntry(plan_id=plan.id, recipe_id=recipe.id)
    try:
        db.add(entry)
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Failed to add recipe {recipe_id} to plan {plan_id}: {e}")
        raise StoreError("Error adding the recipe to the plan") from e

    db.refresh(entry)
    return entry


def remove_entry(db: Session, user_id: int, entry_id: int) -> None:
    """
    Remove a scheduled recipe.

    Raises:
        NotFoundError: If the entry does not exist or is not the user's.
        StoreError: If the delete fails.
    """
    entry = db.get(PlanEntry, entry_id) if is_storable_id(entry_id) else None
    if entry is None or entry.plan.user_id != user_id:
        raise NotFoundError("Entry not found or does not belong to the user")

    try:
        db.delete(entry)
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Failed to delete plan entry {entry_id}: {e}")
        raise StoreError("Error removing the recipe from the plan") from e


def first_entry_date(db: Session, user_id: int) -> Optional[datetime]:
    """Date of the user's earliest plan, ``None`` without plans."""
    stmt = select(func.min(DailyPlan.date)).where(DailyPlan.user_id == user_id)
    return db.scalar(stmt)


def plan_calorie_totals(db: Session, user_id: int) -> List[Tuple[datetime, int]]:
    """``(plan_date, kcal_total)`` for every plan of the user, oldest first."""
    stmt = (
        select(DailyPlan.date, func.coalesce(func.sum(Recipe.kcal), 0))
        .select_from(DailyPlan)
        .outerjoin(PlanEntry, PlanEntry.plan_id == DailyPlan.id)
        .outerjoin(Recipe, Recipe.id == PlanEntry.recipe_id)
        .where(DailyPlan.user_id == user_id)
        .group_by(DailyPlan.id, DailyPlan.date)
        .order_by(DailyPlan.date)
    )
    return [(plan_date, int(total)) for plan_date, total in db.execute(stmt)]


def calorie_history(
    db: Session,
    user_id: int,
    day_range: Optional[DayRange] = None,
    today: Optional[date] = None,
) -> List[DailyCalories]:
    """
    Continuous calorie series for the user.

    Args:
        db: Database session.
        user_id: Plan owner.
        day_range: Fixed window; ``None`` for the full history to ``today``.
        today: Current UTC day, defaults to now.
    """
    return aggregate(plan_calorie_totals(db, user_id), day_range, today)
