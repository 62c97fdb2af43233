"""List Expenses Use Case

Retrieves a tenant's recorded expenses with pagination, most recent first.
"""
from libs.result import Result, Return
from src.app.repositories.expense_repository import ExpenseRepository
from .dtos import ExpenseDTO, ExpenseListResponseDTO


class ListExpenses:
    def __init__(self, expense_repo: ExpenseRepository):
        self.expense_repo = expense_repo

    async def execute(self, tenant_id: str, limit: int = 20, offset: int = 0) -> Result[ExpenseListResponseDTO]:
        expenses, total = await self.expense_repo.get_by_tenant_id(
            tenant_id=tenant_id, limit=limit, offset=offset
        )
        return Return.ok(
            ExpenseListResponseDTO(
                expenses=[ExpenseDTO.model_validate(expense) for expense in expenses],
                total=total,
                limit=limit,
                offset=offset,
            )
        )
