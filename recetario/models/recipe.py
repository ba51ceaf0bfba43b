"""
Recetario API - Recipe ORM Models.

Recipe with its ingredients and ordered preparation steps.
"""

from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text, UniqueConstraint, Index
from sqlalchemy.orm import relationship

from recetario.database import Base


class Recipe(Base):
    """
    Recipe model.

    Deleting a recipe deletes its ingredients, its steps and every plan entry
    that schedules it.

    Attributes:
        id: Numeric identifier.
        title: Recipe title.
        description: Short description.
        kcal: Calories of one serving (non-negative).
        time: Preparation time label, e.g. "20 min".
        level: Difficulty label, e.g. "Fácil".
        image: Optional image reference.
        author_id: Foreign key to the authoring User.
    """

    __tablename__ = "recipes"
    __table_args__ = (
        Index("ix_recipes_author_id", "author_id"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    kcal = Column(Integer, nullable=False)
    time = Column(String(50), nullable=False)
    level = Column(String(50), nullable=False)
    image = Column(String(500), nullable=True)

    # Foreign key
    author_id = Column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False
    )

    # Timestamps
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc)
    )
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc)
    )

    # Relationships
    author = relationship("User", back_populates="recipes")
    ingredients = relationship(
        "Ingredient",
        back_populates="recipe",
        cascade="all, delete-orphan",
        order_by="Ingredient.id"
    )
    steps = relationship(
        "Step",
        back_populates="recipe",
        cascade="all, delete-orphan",
        order_by="Step.order"
    )
    plan_entries = relationship(
        "PlanEntry",
        back_populates="recipe",
        cascade="all, delete-orphan"
    )

    def __repr__(self) -> str:
        """String representation of Recipe."""
        return f"<Recipe(id={self.id}, title={self.title}, kcal={self.kcal})>"


class Ingredient(Base):
    """Ingredient name attached to a recipe. Names repeat across recipes."""

    __tablename__ = "ingredients"
    __table_args__ = (
        Index("ix_ingredients_recipe_id", "recipe_id"),
        Index("ix_ingredients_name", "name"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    recipe_id = Column(
        Integer,
        ForeignKey("recipes.id", ondelete="CASCADE"),
        nullable=False
    )

    recipe = relationship("Recipe", back_populates="ingredients")

    def __repr__(self) -> str:
        return f"<Ingredient(name={self.name}, recipe_id={self.recipe_id})>"


class Step(Base):
    """Preparation step; ``order`` is 1-based and unique within a recipe."""

    __tablename__ = "steps"
    __table_args__ = (
        UniqueConstraint("recipe_id", "order", name="uq_steps_recipe_order"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    description = Column(Text, nullable=False)
    order = Column(Integer, nullable=False)
    recipe_id = Column(
        Integer,
        ForeignKey("recipes.id", ondelete="CASCADE"),
        nullable=False
    )

    recipe = relationship("Recipe", back_populates="steps")

    def __repr__(self) -> str:
        return f"<Step(recipe_id={self.recipe_id}, order={self.order})>"
