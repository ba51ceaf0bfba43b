"""
Recetario API - Pantry ORM Model.
"""

from sqlalchemy import Column, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import relationship

from recetario.database import Base


class PantryItem(Base):
    """
    Ingredient currently available in a user's pantry.

    Unique per (user, ingredient name). The whole set is replaced on update.
    """

    __tablename__ = "user_pantry_items"
    __table_args__ = (
        UniqueConstraint("user_id", "ingredient_name", name="uq_user_pantry_items_user_ingredient"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    ingredient_name = Column(String(255), nullable=False)
    user_id = Column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False
    )

    user = relationship("User", back_populates="pantry_items")

    def __repr__(self) -> str:
        return f"<PantryItem(user_id={self.user_id}, ingredient_name={self.ingredient_name})>"
