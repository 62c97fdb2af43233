"""Job Repository Interface"""

from abc import ABC, abstractmethod
from typing import List, Tuple
from src.domain.job import Job


class JobRepository(ABC):

    @abstractmethod
    async def create(self, job: Job) -> Job:
        """Persist a new job card"""
        pass

    @abstractmethod
    async def get_by_tenant_id(self, tenant_id: str, limit: int = 20, offset: int = 0) -> Tuple[List[Job], int]:
        """
        List a tenant's jobs, newest first

        Returns:
            Tuple of (jobs, total count)
        """
        pass
