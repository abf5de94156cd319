"""Tenant API routes."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from rentals.api.dependencies import get_current_user
from rentals.core.database import get_db
from rentals.models.user import User
from rentals.schemas.tenant import TenantCreate, TenantResponse, TenantUpdate
from rentals.services import tenant as tenant_service

router = APIRouter(prefix="/tenants", tags=["tenants"])


@router.post("", response_model=TenantResponse, status_code=status.HTTP_201_CREATED)
def create_tenant(
    tenant_data: TenantCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Register a tenant in a unit."""
    return tenant_service.create_tenant(db, tenant_data, current_user.id)


@router.get("", response_model=list[TenantResponse])
def list_tenants(
    unit_id: int | None = None,
    db: Session = Depends(get_db),
    _: User = Depends(get_current_user),
):
    return tenant_service.get_tenants(db, unit_id)


@router.patch("/{tenant_id}", response_model=TenantResponse)
def update_tenant(
    tenant_id: int,
    tenant_data: TenantUpdate,
    db: Session = Depends(get_db),
    _: User = Depends(get_current_user),
):
    return tenant_service.update_tenant(db, tenant_id, tenant_data)


@router.delete("/{tenant_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_tenant(
    tenant_id: int,
    db: Session = Depends(get_db),
    _: User = Depends(get_current_user),
):
    tenant_service.delete_tenant(db, tenant_id)
