"""Security group sync jobs."""

from nsg_ssot.jobs.base import DataSyncBaseJob, Sync, SyncLogEntry
from nsg_ssot.jobs.security_groups import (
    SecurityGroupSync,
    process_consumer_groups,
    process_environment_groups,
    process_groups,
)

__all__ = (
    "DataSyncBaseJob",
    "SecurityGroupSync",
    "Sync",
    "SyncLogEntry",
    "process_consumer_groups",
    "process_environment_groups",
    "process_groups",
)
