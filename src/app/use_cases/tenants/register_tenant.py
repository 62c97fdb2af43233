"""RegisterTenant Use Case

Creates a pending carwash account with the signup bonus.
"""

import logging
from decimal import Decimal
from sqlalchemy.exc import IntegrityError
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.services.notification_service import NotificationService
from src.app.repositories.tenant_account_repository import TenantAccountRepository
from src.app.repositories.activity_log_repository import ActivityLogRepository
from src.domain.activity_log import ActivityLog, ActivityType
from src.domain.errors import TenantAlreadyExists
from src.domain.tenant_account import TenantAccount
from .dtos import RegisterTenantCommandDTO, TenantDTO

logger = logging.getLogger(__name__)


class RegisterTenant:
    """
    Use Case: Register a carwash

    Business Rules:
    1. One account per authentication principal (TENANT_ALREADY_EXISTS)
    2. New accounts start pending (approved=False) with the signup bonus
    3. Welcome email is sent after commit; its failure does not undo anything
    """

    def __init__(
        self,
        uow: UnitOfWork,
        tenant_repo: TenantAccountRepository,
        activity_repo: ActivityLogRepository,
        notification_service: NotificationService,
        signup_bonus: Decimal = Decimal("200"),
    ):
        self.uow = uow
        self.tenant_repo = tenant_repo
        self.activity_repo = activity_repo
        self.notification_service = notification_service
        self.signup_bonus = Decimal(signup_bonus)

    async def execute(self, command: RegisterTenantCommandDTO) -> Result[TenantDTO]:
        existing = await self.tenant_repo.get_by_owner_uid(command.owner_uid)
        if existing:
            return Return.err(TenantAlreadyExists(command.owner_uid).to_error())

        try:
            async with self.uow:
                account = await self.tenant_repo.create(
                    TenantAccount(
                        owner_uid=command.owner_uid,
                        name=command.name,
                        email=command.email,
                        phone_number=command.phone_number,
                        credits=self.signup_bonus,
                        approved=False,
                    )
                )
                await self.activity_repo.create(
                    ActivityLog(
                        tenant_id=account.id,
                        activity_type=ActivityType.ACCOUNT,
                        description=f"Account created with {self.signup_bonus.normalize():f} free credits",
                        status="Pending",
                    )
                )
                await self.uow.commit()
        except IntegrityError:
            # Concurrent registration by the same principal
            return Return.err(TenantAlreadyExists(command.owner_uid).to_error())
        except Exception as e:
            logger.exception(f"Registration failed for principal {command.owner_uid}")
            return Return.err(
                Error(
                    code="REGISTER_TENANT_FAILED",
                    message="Something went wrong. Please try again.",
                    reason=str(e),
                )
            )

        logger.info(f"Tenant {account.id} registered for principal {command.owner_uid}")

        sent = await self.notification_service.send_account_created(
            account, f"{self.signup_bonus.normalize():f}"
        )
        if not sent:
            logger.warning(f"Welcome email to tenant {account.id} was not sent")

        return Return.ok(TenantDTO.model_validate(account))
