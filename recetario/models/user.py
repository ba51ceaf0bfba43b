"""
Recetario API - User ORM Model.

User model with profile information and relationships to all user-owned entities.
"""

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from recetario.database import Base


class User(Base):
    """
    User model representing application users.

    Stores credentials, contact details and the daily calorie goal.
    Owns recipes (as author), daily plans and pantry items; deleting a user
    deletes all of them.

    Attributes:
        id: Numeric identifier.
        name: Display name.
        email: Email address (unique, indexed).
        password_hash: Bcrypt-hashed password.
        calorie_goal: Daily calorie goal.
        avatar: Avatar image URL.
        phone: Phone number.
        address: Postal address.
        id_number: National identity document number.
    """

    __tablename__ = "users"

    # Primary key
    id = Column(
        Integer,
        primary_key=True,
        autoincrement=True
    )

    # Authentication
    email = Column(
        String(255),
        unique=True,
        nullable=False,
        index=True
    )
    password_hash = Column(
        String(255),
        nullable=False
    )

    # Profile
    name = Column(
        String(255),
        nullable=False
    )
    calorie_goal = Column(
        Integer,
        nullable=False
    )
    avatar = Column(String(500), nullable=True)
    phone = Column(String(50), nullable=False)
    address = Column(String(500), nullable=False)
    id_number = Column(String(50), nullable=False)

    # Relationships
    recipes = relationship(
        "Recipe",
        back_populates="author",
        cascade="all, delete-orphan"
    )
    daily_plans = relationship(
        "DailyPlan",
        back_populates="user",
        cascade="all, delete-orphan"
    )
    pantry_items = relationship(
        "PantryItem",
        back_populates="user",
        cascade="all, delete-orphan"
    )

    def __repr__(self) -> str:
        """String representation of User."""
        return f"<User(id={self.id}, email={self.email})>"
