"""
Scheduling component - Job booking and lifecycle.
"""

from ._impl import JobScheduler, SchedulingConfig, as_utc
from .component import (
    build_config,
    create_scheduler,
    run,
    run_check_availability,
    run_get_job,
    run_list_jobs,
    run_reschedule,
    run_schedule,
    run_update_status,
)
from .models import (
    CheckJobAvailabilityInput,
    GetJobInput,
    JobAvailabilityOutput,
    JobListOutput,
    JobOutput,
    ListJobsInput,
    RescheduleJobInput,
    ScheduleJobInput,
    SchedulingValidationError,
    UpdateJobStatusInput,
)
from .ports import JobRepoPort

__all__ = [
    # Entry points
    "run",
    "run_schedule",
    "run_check_availability",
    "run_update_status",
    "run_reschedule",
    "run_get_job",
    "run_list_jobs",
    # Service
    "JobScheduler",
    "SchedulingConfig",
    "build_config",
    "create_scheduler",
    "as_utc",
    # Input models
    "ScheduleJobInput",
    "CheckJobAvailabilityInput",
    "UpdateJobStatusInput",
    "RescheduleJobInput",
    "GetJobInput",
    "ListJobsInput",
    # Output models
    "JobOutput",
    "JobListOutput",
    "JobAvailabilityOutput",
    "SchedulingValidationError",
    # Ports
    "JobRepoPort",
]
