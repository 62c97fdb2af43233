"""Client Repository Interface"""

from abc import ABC, abstractmethod
from typing import Optional
from src.domain.client import Client


class ClientRepository(ABC):

    @abstractmethod
    async def get(self, tenant_id: str, client_id: str) -> Optional[Client]:
        pass

    @abstractmethod
    async def save(self, client: Client) -> Client:
        """Insert or update a client"""
        pass
