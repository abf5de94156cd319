"""User API routes."""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from rentals.api.dependencies import get_current_user, get_optional_user, require_manager
from rentals.core.database import get_db
from rentals.models.user import User
from rentals.schemas.user import UserCreate, UserProfileUpdate, UserResponse, UserRoleUpdate
from rentals.services import user as user_service

router = APIRouter(prefix="/users", tags=["users"])


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def create_user(
    user_data: UserCreate,
    db: Session = Depends(get_db),
    current_user: User | None = Depends(get_optional_user),
):
    """Create a user. Only the very first user may be created anonymously."""
    if user_service.count_users(db) > 0:
        if current_user is None:
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Not authenticated",
            )
        if not current_user.get_is_manager():
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Manager role required",
            )
    return user_service.create_user(db, user_data)


@router.get("", response_model=list[UserResponse])
def list_users(
    db: Session = Depends(get_db),
    _: User = Depends(require_manager),
):
    return user_service.get_users(db)


@router.get("/me", response_model=UserResponse)
def read_me(current_user: User = Depends(get_current_user)):
    return current_user


@router.patch("/me", response_model=UserResponse)
def update_me(
    profile_data: UserProfileUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Update the acting user's own profile."""
    return user_service.update_profile(db, current_user, profile_data)


@router.patch("/{user_id}/role", response_model=UserResponse)
def update_role(
    user_id: int,
    role_data: UserRoleUpdate,
    db: Session = Depends(get_db),
    _: User = Depends(require_manager),
):
    """Promote or demote a user."""
    return user_service.update_user_role(db, user_id, role_data.role)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_user(
    user_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_manager),
):
    if user_id == current_user.id:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="You cannot delete your own account",
        )
    user_service.delete_user(db, user_id)
