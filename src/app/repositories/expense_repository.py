"""Expense Repository Interface"""

from abc import ABC, abstractmethod
from typing import List, Tuple
from src.domain.expense import Expense


class ExpenseRepository(ABC):

    @abstractmethod
    async def create(self, expense: Expense) -> Expense:
        """Persist a new expense"""
        pass

    @abstractmethod
    async def get_by_tenant_id(self, tenant_id: str, limit: int = 20, offset: int = 0) -> Tuple[List[Expense], int]:
        """
        List a tenant's expenses, newest first

        Returns:
            Tuple of (expenses, total count)
        """
        pass
