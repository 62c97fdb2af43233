"""SQLAlchemy implementation of VehicleRepository"""

from typing import Optional
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.vehicle_repository import VehicleRepository
from src.domain.client import Vehicle


class SqlAlchemyVehicleRepository(VehicleRepository):

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_plate(self, tenant_id: str, client_id: str, registration_plate: str) -> Optional[Vehicle]:
        stmt = (
            select(Vehicle)
            .where(Vehicle.tenant_id == tenant_id)
            .where(Vehicle.client_id == client_id)
            .where(Vehicle.registration_plate == registration_plate.upper())
            .limit(1)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def save(self, vehicle: Vehicle) -> Vehicle:
        self.session.add(vehicle)
        await self.session.flush()
        await self.session.refresh(vehicle)
        return vehicle
