"""Jobs reconciling NAM NSX security groups with NetBox IPAM prefix tags."""

from diffsync.enum import DiffSyncFlags

from nsg_ssot.constants import CONSUMER, ENVIRONMENT, SYSTEM_IPAM, SYSTEM_NAM, Dimension
from nsg_ssot.diffsync.adapters import NAMAdapter, NetboxAdapter
from nsg_ssot.jobs.base import DataSyncBaseJob, Sync


class SecurityGroupSync(DataSyncBaseJob):
    """Create or patch one NSX security group per grouping key of a dimension.

    A group holds exactly the eligible IPAM prefixes tagged with its key. Groups that are missing
    in NAM are created, groups whose membership differs are patched with the full desired member
    list. Failures of a single key are recorded on the Sync and never abort the other keys;
    failures discovering the keys or listing the NAM groups propagate to the caller.
    """

    data_source = SYSTEM_IPAM
    data_target = SYSTEM_NAM

    def __init__(self, ipam, nam, dimension: Dimension, enabled: bool = True, dryrun: bool = False):
        """Initialize SecurityGroupSync.

        Args:
            ipam (NetboxClient): NetBox client, the source of truth.
            nam (NAMClient): NAM client, the system enforcing the security groups.
            dimension (Dimension): Grouping dimension to reconcile.
            enabled (bool, optional): Process the grouping keys, defaults to True. When False the keys
                are only discovered and no group is ever created or updated.
            dryrun (bool, optional): Calculate and log the diff without writing to NAM.
        """
        super().__init__(dryrun=dryrun)
        self.ipam = ipam
        self.nam = nam
        self.dimension = dimension
        self.enabled = enabled
        # Groups in NAM without a matching grouping key are left untouched.
        self.diffsync_flags = (
            self.diffsync_flags | DiffSyncFlags.SKIP_UNMATCHED_DST  # pylint: disable=unsupported-binary-operation
        )

    def load_source_adapter(self):
        """Load the desired security groups from NetBox."""
        self.source_adapter = NetboxAdapter(
            job=self, api_client=self.ipam, dimension=self.dimension, process_keys=self.enabled
        )
        self.source_adapter.load()

    def load_target_adapter(self):
        """Load the existing security groups from NAM."""
        self.target_adapter = NAMAdapter(job=self, api_client=self.nam, dimension=self.dimension)
        self.target_adapter.load()

    def sync_data(self):
        """Reconcile the security groups, or only discover the keys when not enabled."""
        if self.enabled:
            super().sync_data()
            return

        self.load_source_adapter()
        self.logger.info(
            "Security group reconciliation is disabled, skipping %s %s keys.", len(self.sync.keys), self.dimension.name
        )


def process_groups(nam, ipam, dimension: Dimension, enabled: bool = True, dryrun: bool = False) -> Sync:
    """Reconcile the NAM security groups of a dimension with NetBox.

    Returns:
        Sync: Record of the run, including the failures of individual grouping keys.
    """
    return SecurityGroupSync(ipam=ipam, nam=nam, dimension=dimension, enabled=enabled, dryrun=dryrun).run()


def process_consumer_groups(nam, ipam, enabled: bool = True, dryrun: bool = False) -> Sync:
    """Reconcile the `nsg-consumer-<domain>` security groups."""
    return process_groups(nam, ipam, CONSUMER, enabled=enabled, dryrun=dryrun)


def process_environment_groups(nam, ipam, enabled: bool = True, dryrun: bool = False) -> Sync:
    """Reconcile the `nsg-environment-<env>` security groups."""
    return process_groups(nam, ipam, ENVIRONMENT, enabled=enabled, dryrun=dryrun)
