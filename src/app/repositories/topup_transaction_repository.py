"""Top-Up Transaction Repository Interface

Idempotency of top-ups rests on the reference being the primary key.
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Tuple
from src.domain.topup_transaction import TopUpTransaction


class TopUpTransactionRepository(ABC):

    @abstractmethod
    async def get_by_reference(self, reference: str) -> Optional[TopUpTransaction]:
        """
        Retrieve the top-up applied for a payment reference

        Args:
            reference: Payment gateway reference

        Returns:
            TopUpTransaction if this reference was already applied, None otherwise
        """
        pass

    @abstractmethod
    async def create(self, transaction: TopUpTransaction) -> TopUpTransaction:
        """
        Insert a top-up record

        Raises:
            IntegrityError: If a record for the reference already exists
        """
        pass

    @abstractmethod
    async def get_by_tenant_id(
        self, tenant_id: str, limit: int = 20, offset: int = 0
    ) -> Tuple[List[TopUpTransaction], int]:
        """List a tenant's top-ups, newest first, with total count"""
        pass
