"""Tenant account use cases"""
from .register_tenant import RegisterTenant
from .approve_tenant import ApproveTenant
from .authorize_tenant import AuthorizeTenant
from .list_pending_tenants import ListPendingTenants
from .dtos import (
    RegisterTenantCommandDTO,
    TenantDTO,
    PendingTenantListResponseDTO,
    ApprovalResponseDTO,
)

__all__ = [
    "RegisterTenant",
    "ApproveTenant",
    "AuthorizeTenant",
    "ListPendingTenants",
    "RegisterTenantCommandDTO",
    "TenantDTO",
    "PendingTenantListResponseDTO",
    "ApprovalResponseDTO",
]
