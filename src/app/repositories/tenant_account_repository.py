"""Tenant Account Repository Interface

Defines the contract for tenant account persistence, including the only
operations allowed to change a credit balance.
"""

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import List, Optional, Tuple
from src.domain.tenant_account import TenantAccount


class TenantAccountRepository(ABC):
    """
    Repository interface for TenantAccount persistence

    Balance changes go through debit/credit, which are single conditional
    UPDATE statements. There is no plain balance setter.
    """

    @abstractmethod
    async def get_by_id(self, tenant_id: str, for_update: bool = False) -> Optional[TenantAccount]:
        """
        Retrieve a tenant account

        Args:
            tenant_id: Tenant identifier
            for_update: If True, lock the row with SELECT FOR UPDATE

        Returns:
            TenantAccount if found, None otherwise
        """
        pass

    @abstractmethod
    async def get_by_owner_uid(self, owner_uid: str) -> Optional[TenantAccount]:
        """Retrieve the tenant owned by an authentication principal"""
        pass

    @abstractmethod
    async def create(self, account: TenantAccount) -> TenantAccount:
        """Persist a new tenant account"""
        pass

    @abstractmethod
    async def debit(self, tenant_id: str, amount: Decimal) -> Optional[Decimal]:
        """
        Subtract credits only if the balance covers the amount

        Args:
            tenant_id: Tenant identifier
            amount: Credits to subtract

        Returns:
            New balance, or None if no row matched (missing tenant or
            insufficient balance)
        """
        pass

    @abstractmethod
    async def credit(self, tenant_id: str, amount: Decimal) -> Optional[Decimal]:
        """
        Add credits to the balance

        Returns:
            New balance, or None if the tenant does not exist
        """
        pass

    @abstractmethod
    async def mark_approved(self, tenant_id: str) -> bool:
        """
        Flip a pending tenant to approved

        Returns:
            True if a pending row was updated
        """
        pass

    @abstractmethod
    async def list_pending(self, limit: int = 20, offset: int = 0) -> Tuple[List[TenantAccount], int]:
        """List tenants awaiting approval, oldest first, with total count"""
        pass
