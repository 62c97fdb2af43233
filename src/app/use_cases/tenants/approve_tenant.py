"""ApproveTenant Use Case

Moves a tenant from pending to approved. Super-admin only.
"""

import logging
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.services.notification_service import NotificationService
from src.app.repositories.tenant_account_repository import TenantAccountRepository
from src.app.repositories.activity_log_repository import ActivityLogRepository
from src.domain.activity_log import ActivityLog, ActivityType
from src.domain.errors import LedgerError, TenantNotFound, TenantAlreadyApproved
from .dtos import ApprovalResponseDTO

logger = logging.getLogger(__name__)


class ApproveTenant:
    """
    Use Case: Approve a carwash account

    Business Rules:
    1. Tenant must exist (TENANT_NOT_FOUND)
    2. Approval is one-directional (TENANT_ALREADY_APPROVED on repeat)
    3. Flag flip and Admin activity commit together
    4. Approval email is fire-and-forget after commit

    Flow:
    1. Load tenant
    2. Guarded UPDATE approved=True WHERE approved=False
    3. Append "Account approved by Super Admin"
    4. Commit, then notify
    """

    def __init__(
        self,
        uow: UnitOfWork,
        tenant_repo: TenantAccountRepository,
        activity_repo: ActivityLogRepository,
        notification_service: NotificationService,
        login_url: str,
    ):
        self.uow = uow
        self.tenant_repo = tenant_repo
        self.activity_repo = activity_repo
        self.notification_service = notification_service
        self.login_url = login_url

    async def execute(self, tenant_id: str) -> Result[ApprovalResponseDTO]:
        try:
            async with self.uow:
                account = await self.tenant_repo.get_by_id(tenant_id, for_update=True)
                if not account:
                    raise TenantNotFound(tenant_id)
                if account.approved:
                    raise TenantAlreadyApproved(tenant_id)

                # A concurrent approval may have won between read and update
                if not await self.tenant_repo.mark_approved(tenant_id):
                    raise TenantAlreadyApproved(tenant_id)

                await self.activity_repo.create(
                    ActivityLog(
                        tenant_id=tenant_id,
                        activity_type=ActivityType.ADMIN,
                        description="Account approved by Super Admin",
                        status="Approved",
                    )
                )
                await self.uow.commit()
        except LedgerError as e:
            return Return.err(e.to_error())
        except Exception as e:
            logger.exception(f"Approval of tenant {tenant_id} failed")
            return Return.err(
                Error(
                    code="APPROVE_TENANT_FAILED",
                    message="Failed to approve account.",
                    reason=str(e),
                )
            )

        logger.info(f"Tenant {tenant_id} approved")

        sent = await self.notification_service.send_account_approved(account, self.login_url)
        if not sent:
            logger.warning(f"Approval email to tenant {tenant_id} was not sent")

        return Return.ok(ApprovalResponseDTO(tenant_id=tenant_id, approved=True, notification_sent=sent))
