"""Activity Log Repository Interface"""

from abc import ABC, abstractmethod
from typing import List, Tuple
from src.domain.activity_log import ActivityLog


class ActivityLogRepository(ABC):
    """Append-only store of activity entries"""

    @abstractmethod
    async def create(self, entry: ActivityLog) -> ActivityLog:
        pass

    @abstractmethod
    async def get_by_tenant_id(self, tenant_id: str, limit: int = 20, offset: int = 0) -> Tuple[List[ActivityLog], int]:
        pass
