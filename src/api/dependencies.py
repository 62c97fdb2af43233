"""Request-level access dependencies

- Principal: X-Principal-Id header set by the authenticating proxy
- Tenant gate: principal must own an approved tenant
- Super-admin: X-Admin-API-Key header
"""

import logging
import secrets
from typing import Optional
from fastapi import Depends, Header, Request
from fastapi.security import APIKeyHeader
from sqlmodel.ext.asyncio.session import AsyncSession
from libs.result import Error
from src.adapter.repositories.tenant_account_repository import SqlAlchemyTenantAccountRepository
from src.api.error import ClientError
from src.app.use_cases.tenants.authorize_tenant import AuthorizeTenant
from src.depends import get_config, get_session
from src.domain.tenant_account import TenantAccount

logger = logging.getLogger(__name__)

_admin_key_header = APIKeyHeader(name="X-Admin-API-Key", auto_error=False)


async def get_principal_uid(
    x_principal_id: Optional[str] = Header(default=None, alias="X-Principal-Id"),
) -> str:
    if not x_principal_id:
        raise ClientError(
            Error(code="UNAUTHENTICATED", message="Authentication required"),
            status_code=401,
        )
    return x_principal_id


async def _authorize(
    tenant_id: str, principal_uid: str, session: AsyncSession, require_approved: bool
) -> TenantAccount:
    result = await AuthorizeTenant(SqlAlchemyTenantAccountRepository(session)).execute(
        tenant_id, principal_uid, require_approved=require_approved
    )
    if result.is_err():
        raise ClientError.from_error(result.error)
    return result.value


async def require_approved_tenant(
    tenant_id: str,
    principal_uid: str = Depends(get_principal_uid),
    session: AsyncSession = Depends(get_session),
) -> TenantAccount:
    """Gate for operating a tenant: exists, owned by caller, approved"""
    return await _authorize(tenant_id, principal_uid, session, require_approved=True)


async def require_tenant_owner(
    tenant_id: str,
    principal_uid: str = Depends(get_principal_uid),
    session: AsyncSession = Depends(get_session),
) -> TenantAccount:
    """Gate for read-only views a pending owner may still see"""
    return await _authorize(tenant_id, principal_uid, session, require_approved=False)


async def require_admin_api_key(
    request: Request,
    api_key: Optional[str] = Depends(_admin_key_header),
) -> None:
    """
    Validate super-admin access

    401 when the key is missing, 403 when it does not match. With no key
    configured, admin access is closed entirely.
    """
    expected = get_config(request).SUPER_ADMIN_API_KEY
    if not expected:
        logger.warning("Admin access denied: SUPER_ADMIN_API_KEY is not configured")
        raise ClientError(Error(code="FORBIDDEN", message="Admin access is not configured"), status_code=403)

    if not api_key:
        raise ClientError(
            Error(code="UNAUTHENTICATED", message="Missing API key header: X-Admin-API-Key"),
            status_code=401,
        )

    if not secrets.compare_digest(api_key.encode("utf-8"), str(expected).encode("utf-8")):
        logger.warning("Admin access denied: invalid API key")
        raise ClientError(Error(code="FORBIDDEN", message="Invalid API key"), status_code=403)
