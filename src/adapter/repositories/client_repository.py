"""SQLAlchemy implementation of ClientRepository"""

from typing import Optional
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.client_repository import ClientRepository
from src.domain.client import Client


class SqlAlchemyClientRepository(ClientRepository):

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get(self, tenant_id: str, client_id: str) -> Optional[Client]:
        return await self.session.get(Client, (tenant_id, client_id))

    async def save(self, client: Client) -> Client:
        merged = await self.session.merge(client)
        await self.session.flush()
        return merged
