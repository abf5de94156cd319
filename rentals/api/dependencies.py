"""Request dependencies resolving the acting user."""

from fastapi import Depends, Header, HTTPException, status
from sqlalchemy.orm import Session

from rentals.core.database import get_db
from rentals.models.user import User


def get_optional_user(
    x_user_id: int | None = Header(default=None),
    db: Session = Depends(get_db),
) -> User | None:
    """Resolve the X-User-Id header, if sent, to an active user."""
    if x_user_id is None:
        return None
    return db.query(User).filter(User.id == x_user_id, User.is_active.is_(True)).first()


def get_current_user(user: User | None = Depends(get_optional_user)) -> User:
    """Require a known acting user."""
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )
    return user


def require_manager(user: User = Depends(get_current_user)) -> User:
    """Require the acting user to be a manager."""
    if not user.get_is_manager():
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Manager role required",
        )
    return user
