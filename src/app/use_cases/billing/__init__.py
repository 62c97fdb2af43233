"""Billing domain use cases"""
from .create_job_card import CreateJobCard
from .record_expense import RecordExpense
from .confirm_topup import ConfirmTopUp
from .initialize_topup import InitializeTopUp
from .get_balance import GetBalance
from .list_jobs import ListJobs
from .list_expenses import ListExpenses
from .list_topups import ListTopUps
from .list_activities import ListActivities
from .ledger_transaction import RetryPolicy, run_ledger_transaction
from .dtos import (
    CreateJobCardCommandDTO,
    RecordExpenseCommandDTO,
    ConfirmTopUpCommandDTO,
    InitializeTopUpCommandDTO,
    JobDTO,
    ExpenseDTO,
    TopUpDTO,
    ActivityDTO,
    JobCardResponseDTO,
    ExpenseResponseDTO,
    TopUpResponseDTO,
    InitializeTopUpResponseDTO,
    BalanceResponseDTO,
    JobListResponseDTO,
    ExpenseListResponseDTO,
    TopUpListResponseDTO,
    ActivityListResponseDTO,
)

__all__ = [
    "CreateJobCard",
    "RecordExpense",
    "ConfirmTopUp",
    "InitializeTopUp",
    "GetBalance",
    "ListJobs",
    "ListExpenses",
    "ListTopUps",
    "ListActivities",
    "RetryPolicy",
    "run_ledger_transaction",
    "CreateJobCardCommandDTO",
    "RecordExpenseCommandDTO",
    "ConfirmTopUpCommandDTO",
    "InitializeTopUpCommandDTO",
    "JobDTO",
    "ExpenseDTO",
    "TopUpDTO",
    "ActivityDTO",
    "JobCardResponseDTO",
    "ExpenseResponseDTO",
    "TopUpResponseDTO",
    "InitializeTopUpResponseDTO",
    "BalanceResponseDTO",
    "JobListResponseDTO",
    "ExpenseListResponseDTO",
    "TopUpListResponseDTO",
    "ActivityListResponseDTO",
]
