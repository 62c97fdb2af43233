"""CreateJobCard Use Case

Creates a job card and pays for it with the tenant's credits. The client and
vehicle are upserted in the same transaction.
"""

from decimal import Decimal
from typing import Optional, Tuple
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.tenant_account_repository import TenantAccountRepository
from src.app.repositories.pricing_config_repository import PricingConfigRepository
from src.app.repositories.activity_log_repository import ActivityLogRepository
from src.app.repositories.client_repository import ClientRepository
from src.app.repositories.vehicle_repository import VehicleRepository
from src.app.repositories.job_repository import JobRepository
from src.domain.activity_log import ActivityLog, ActivityType
from src.domain.base import generate_uuid
from src.domain.client import Client, Vehicle
from src.domain.job import Job, JobStatus
from src.domain.pricing_config import PricingConfig
from src.domain.tenant_account import TenantAccount
from .credit_metered_action import Charge, CreditMeteredAction
from .dtos import CreateJobCardCommandDTO, JobCardResponseDTO, JobDTO
from .ledger_transaction import RetryPolicy


class CreateJobCard(CreditMeteredAction[CreateJobCardCommandDTO, Job, JobCardResponseDTO]):
    """
    Use Case: Create a job card (costs job_card_cost credits)

    Writes, all in one transaction:
    - client (keyed by phone number), created or updated
    - vehicle (matched by upper-case plate), created or updated
    - job with status Pending
    - activity entry "Created job for <PLATE> (<service>)"
    - balance debit
    """

    action_label = "create a job card"
    failure_code = "CREATE_JOB_FAILED"

    def __init__(
        self,
        uow: UnitOfWork,
        tenant_repo: TenantAccountRepository,
        pricing_repo: PricingConfigRepository,
        activity_repo: ActivityLogRepository,
        client_repo: ClientRepository,
        vehicle_repo: VehicleRepository,
        job_repo: JobRepository,
        retry_policy: Optional[RetryPolicy] = None,
    ):
        super().__init__(uow, tenant_repo, pricing_repo, activity_repo, retry_policy)
        self.client_repo = client_repo
        self.vehicle_repo = vehicle_repo
        self.job_repo = job_repo

    def tenant_of(self, command: CreateJobCardCommandDTO) -> str:
        return command.tenant_id

    def cost_of(self, pricing: PricingConfig) -> Decimal:
        return pricing.job_card_cost

    async def write_record(
        self, command: CreateJobCardCommandDTO, tenant: TenantAccount, cost: Decimal
    ) -> Tuple[Job, ActivityLog]:
        client_id = command.client_phone_number
        plate = command.registration_plate.strip().upper()

        client = await self.client_repo.get(tenant.id, client_id)
        if client:
            client.name = command.client_name
            client.email = command.client_email
        else:
            client = Client(
                tenant_id=tenant.id,
                id=client_id,
                name=command.client_name,
                phone_number=command.client_phone_number,
                email=command.client_email,
            )
        await self.client_repo.save(client)

        vehicle = await self.vehicle_repo.get_by_plate(tenant.id, client_id, plate)
        if vehicle:
            vehicle.make = command.car_make
            vehicle.model = command.car_model
            vehicle.color = command.car_color
            vehicle.vehicle_type = command.vehicle_type
        else:
            vehicle = Vehicle(
                id=generate_uuid(),
                tenant_id=tenant.id,
                client_id=client_id,
                registration_plate=plate,
                make=command.car_make,
                model=command.car_model,
                color=command.car_color,
                vehicle_type=command.vehicle_type,
            )
        vehicle = await self.vehicle_repo.save(vehicle)

        job = await self.job_repo.create(
            Job(
                id=generate_uuid(),
                tenant_id=tenant.id,
                client_id=client_id,
                vehicle_id=vehicle.id,
                client_phone_number=command.client_phone_number,
                registration_plate=plate,
                service=command.service,
                price=command.price,
                duration=command.duration,
                team_member_name=command.team_member_name,
                status=JobStatus.PENDING,
                credits_charged=cost,
            )
        )

        activity = ActivityLog(
            tenant_id=tenant.id,
            activity_type=ActivityType.JOB,
            description=f"Created job for {plate} ({command.service})",
            status=JobStatus.PENDING.value,
        )
        return job, activity

    def to_response(self, charge: Charge[Job]) -> JobCardResponseDTO:
        return JobCardResponseDTO(
            job=JobDTO.model_validate(charge.record),
            credits_charged=charge.cost,
            balance_before=charge.balance_before,
            balance_after=charge.balance_after,
        )
