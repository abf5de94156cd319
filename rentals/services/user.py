"""User service for business logic."""

import logging

from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from rentals.models.enums import UserRole
from rentals.models.user import User
from rentals.schemas.user import UserCreate, UserProfileUpdate

logger = logging.getLogger(__name__)


def count_users(db: Session) -> int:
    return db.query(User).count()


def get_user_by_email(db: Session, email: str) -> User | None:
    return db.query(User).filter(User.email == email).first()


def create_user(db: Session, user_data: UserCreate) -> User:
    """Create a new user. The very first user is always a manager."""
    if get_user_by_email(db, user_data.email):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Email already registered",
        )

    role = UserRole.MANAGER if count_users(db) == 0 else user_data.role
    db_user = User(
        email=user_data.email,
        full_name=user_data.full_name,
        phone_number=user_data.phone_number,
        role=role,
    )
    db.add(db_user)
    db.commit()
    db.refresh(db_user)
    logger.info("Created user %s with role %s", db_user.email, db_user.role)
    return db_user


def get_user(db: Session, user_id: int) -> User:
    """Get a user by ID."""
    db_user = db.query(User).filter(User.id == user_id).first()
    if not db_user:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found",
        )
    return db_user


def get_users(db: Session) -> list[User]:
    return db.query(User).order_by(User.created_at).all()


def get_users_map_by_ids(db: Session, user_ids: list[int | None]) -> dict[int, str]:
    """Map user IDs to display names, skipping empty IDs."""
    unique_ids = {user_id for user_id in user_ids if user_id is not None}
    if not unique_ids:
        return {}
    users = db.query(User).filter(User.id.in_(unique_ids)).all()
    return {u.id: u.display_name for u in users}


def update_profile(db: Session, db_user: User, profile_data: UserProfileUpdate) -> User:
    """Update the acting user's own profile."""
    update_data = profile_data.model_dump(exclude_unset=True)
    new_email = update_data.get("email")
    if new_email and new_email != db_user.email:
        existing = get_user_by_email(db, new_email)
        if existing:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Email already registered",
            )

    for field, value in update_data.items():
        setattr(db_user, field, value)

    db.commit()
    db.refresh(db_user)
    return db_user


def update_user_role(db: Session, user_id: int, role: UserRole) -> User:
    db_user = get_user(db, user_id)
    db_user.role = role
    db.commit()
    db.refresh(db_user)
    logger.info("Changed role of user %s to %s", db_user.email, role.value)
    return db_user


def delete_user(db: Session, user_id: int) -> None:
    db_user = get_user(db, user_id)
    db.delete(db_user)
    db.commit()
