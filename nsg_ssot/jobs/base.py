"""Base Job classes for sync workers."""

import logging
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Any, List, Optional

from diffsync.enum import DiffSyncFlags
import structlog

from nsg_ssot.choices import SyncLogEntryActionChoices
from nsg_ssot.exceptions import PerKeyFailure


@dataclass
class SyncLogEntry:
    """Record of a single action taken during a sync."""

    action: str
    status: str
    message: str = ""
    diff: Optional[dict] = None
    object_repr: str = ""
    timestamp: datetime = field(default_factory=datetime.now)


@dataclass
class Sync:  # pylint: disable=too-many-instance-attributes
    """Record of a single sync run, returned to the caller."""

    source: str
    target: str
    dry_run: bool = False
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None
    source_load_time: Optional[timedelta] = None
    target_load_time: Optional[timedelta] = None
    diff_time: Optional[timedelta] = None
    sync_time: Optional[timedelta] = None
    diff: dict = field(default_factory=dict)
    summary: Optional[dict] = None
    keys: List[str] = field(default_factory=list)
    log: List[SyncLogEntry] = field(default_factory=list)
    failures: List[PerKeyFailure] = field(default_factory=list)

    def __str__(self):
        """String representation of a Sync instance."""
        return f"{self.source} → {self.target}, {self.start_time}"

    @property
    def succeeded(self) -> bool:
        """Whether every grouping key was processed without failure."""
        return not self.failures


class DataSyncBaseJob:  # pylint: disable=too-many-instance-attributes
    """Common base class for data synchronization jobs.

    - Concrete subclasses are responsible for implementing `load_source_adapter()` and `load_target_adapter()`.
    - `run()` is the entry point and returns the `Sync` record of the run.
    - `data_source` and `data_target` label the systems data is read from and written to.
    """

    data_source = None
    data_target = None

    def __init__(self, dryrun: bool = False):
        """Initialize a Job."""
        self.logger = logging.getLogger("nsg_ssot.jobs")
        self.dryrun = dryrun
        self.sync = None
        self.diff = None
        self.source_adapter = None
        self.target_adapter = None
        # Default diffsync flags. You can overwrite them at any time.
        self.diffsync_flags = DiffSyncFlags.CONTINUE_ON_FAILURE | DiffSyncFlags.LOG_UNCHANGED_RECORDS

    def load_source_adapter(self):
        """Method to instantiate and load the SOURCE adapter into `self.source_adapter`."""
        raise NotImplementedError

    def load_target_adapter(self):
        """Method to instantiate and load the TARGET adapter into `self.target_adapter`."""
        raise NotImplementedError

    def calculate_diff(self):
        """Method to calculate the difference from SOURCE to TARGET adapter and store in `self.diff`.

        This is a generic implementation that you could overwrite completely in your custom logic.
        """
        if self.source_adapter is not None and self.target_adapter is not None:
            self.diff = self.source_adapter.diff_to(self.target_adapter, flags=self.diffsync_flags)
            self.sync.summary = self.diff.summary()
            self.sync.diff = self.diff.dict()
            self.logger.info(self.diff.summary())
        else:
            self.logger.warning("Not both adapters were properly initialized prior to diff calculation.")

    def execute_sync(self):
        """Method to synchronize the difference from `self.diff`, from SOURCE to TARGET adapter.

        This is a generic implementation that you could overwrite completely in your custom logic.
        """
        if self.source_adapter is not None and self.target_adapter is not None:
            self.source_adapter.sync_to(self.target_adapter, flags=self.diffsync_flags)
        else:
            self.logger.warning("Not both adapters were properly initialized prior to synchronization.")

    def sync_data(self):
        """Method to load data from adapters, calculate diffs and sync (if not dry-run).

        It is composed by 4 methods:
        - self.load_source_adapter: instantiates the source adapter (self.source_adapter) and loads its data
        - self.load_target_adapter: instantiates the target adapter (self.target_adapter) and loads its data
        - self.calculate_diff: generates the diff from source to target adapter and stores it in self.diff
        - self.execute_sync: if not dry-run, uses the self.diff to synchronize from source to target
        """
        if not self.sync:
            return

        start_time = datetime.now()

        self.logger.info("Loading current data from source adapter...")
        self.load_source_adapter()
        load_source_adapter_time = datetime.now()
        self.sync.source_load_time = load_source_adapter_time - start_time
        self.logger.info("Source Load Time from %s: %s", self.source_adapter, self.sync.source_load_time)

        self.logger.info("Loading current data from target adapter...")
        self.load_target_adapter()
        load_target_adapter_time = datetime.now()
        self.sync.target_load_time = load_target_adapter_time - load_source_adapter_time
        self.logger.info("Target Load Time from %s: %s", self.target_adapter, self.sync.target_load_time)

        self.logger.info("Calculating diffs...")
        self.calculate_diff()
        calculate_diff_time = datetime.now()
        self.sync.diff_time = calculate_diff_time - load_target_adapter_time
        self.logger.info("Diff Calculation Time: %s", self.sync.diff_time)

        if self.dryrun:
            self.logger.info("As `dryrun` is set, skipping the actual data sync.")
        else:
            self.logger.info("Syncing from %s to %s...", self.source_adapter, self.target_adapter)
            self.execute_sync()
            execute_sync_time = datetime.now()
            self.sync.sync_time = execute_sync_time - calculate_diff_time
            self.logger.info("Sync complete")
            self.logger.info("Sync Time: %s", self.sync.sync_time)

    def sync_log(  # pylint: disable=too-many-arguments
        self,
        action,
        status,
        message="",
        diff=None,
        object_repr="",
    ):
        """Log a action message as a SyncLogEntry."""
        self.sync.log.append(
            SyncLogEntry(
                action=action,
                status=status,
                message=message,
                diff=diff,
                object_repr=object_repr,
            )
        )

    def record_failure(self, key: str, error: Any):
        """Record a failure scoped to a single grouping key on the current Sync."""
        if self.sync is not None:
            self.sync.failures.append(PerKeyFailure(key, error))

    def _structlog_to_sync_log_entry(self, _logger, _log_method, event_dict):
        """Capture certain structlog messages from DiffSync into the Sync log."""
        if self.sync is None:
            return event_dict
        if all(key in event_dict for key in ("src", "dst", "action", "model", "unique_id", "diffs", "status")):
            action = getattr(event_dict["action"], "value", event_dict["action"])
            status = getattr(event_dict["status"], "value", event_dict["status"])
            self.sync_log(
                action=action or SyncLogEntryActionChoices.ACTION_NO_CHANGE,
                diff=event_dict["diffs"] if action else None,
                status=status,
                message=event_dict["event"],
                object_repr=f"{event_dict['model']} {event_dict['unique_id']}",
            )

        return event_dict

    def run(self) -> Sync:
        """Job entry point - do not override!"""
        self.sync = Sync(
            source=self.data_source,
            target=self.data_target,
            dry_run=self.dryrun,
            start_time=datetime.now(),
        )

        # Add _structlog_to_sync_log_entry as a processor for structlog calls from DiffSync
        structlog.configure(
            processors=[self._structlog_to_sync_log_entry, structlog.stdlib.render_to_log_kwargs],
            context_class=dict,
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )
        try:
            self.sync_data()
        finally:
            self.sync.end_time = datetime.now()
        return self.sync
