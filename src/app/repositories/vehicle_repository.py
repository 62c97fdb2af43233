"""Vehicle Repository Interface"""

from abc import ABC, abstractmethod
from typing import Optional
from src.domain.client import Vehicle


class VehicleRepository(ABC):

    @abstractmethod
    async def get_by_plate(self, tenant_id: str, client_id: str, registration_plate: str) -> Optional[Vehicle]:
        """Find a client's vehicle by its (upper-case) registration plate"""
        pass

    @abstractmethod
    async def save(self, vehicle: Vehicle) -> Vehicle:
        """Insert or update a vehicle"""
        pass
