"""NetBox IPAM adapter for the security group SSoT."""

from typing import List

from diffsync import Adapter
from diffsync.exceptions import ObjectAlreadyExists

from nsg_ssot.constants import CONSUMER, ENVIRONMENT, GROUP_DESCRIPTION, SYSTEM_IPAM, Dimension
from nsg_ssot.diffsync.models.netbox import NetboxSecurityGroup
from nsg_ssot.exceptions import UpstreamFetchFailure
from nsg_ssot.utils import (
    get_grouping_keys,
    get_netbox_domains,
    get_netbox_environments,
    group_name,
    is_eligible_prefix,
    sort_prefixes,
)

KEY_LOADERS = {
    CONSUMER: get_netbox_domains,
    ENVIRONMENT: get_netbox_environments,
}


class NetboxAdapter(Adapter):
    """DiffSync adapter building the desired security groups from NetBox prefix tags."""

    security_group = NetboxSecurityGroup
    top_level = ["security_group"]

    def __init__(self, job, api_client, dimension: Dimension, process_keys: bool = True, *args, **kwargs):
        """Initialize NetBox adapter.

        Args:
            job (SecurityGroupSync): Job running the sync, used for logging and failure tracking.
            api_client (NetboxClient): NetBox client.
            dimension (Dimension): Grouping dimension to build security groups for.
            process_keys (bool, optional): Fetch prefixes for each grouping key. When False only the keys are loaded.
        """
        super().__init__(*args, **kwargs)
        self.job = job
        self.api_client = api_client
        self.dimension = dimension
        self.process_keys = process_keys
        self.keys = []

    def load_grouping_keys(self) -> List[str]:
        """Get the grouping keys of the dimension from its custom field choice set."""
        loader = KEY_LOADERS.get(self.dimension)
        if loader:
            return loader(self.api_client)
        return get_grouping_keys(self.api_client, self.dimension.custom_field_name)

    def load_prefixes(self, key: str) -> List[str]:
        """Get the CIDRs of the eligible prefixes tagged with a grouping key.

        NetBox can't combine custom field filters with VRF and status filters, so the latter are applied here.
        """
        prefixes = self.api_client.prefixes.get_prefixes({self.dimension.filter_field_name: key}, True) or {}
        results = prefixes.get("results") or []
        eligible = [prefix["prefix"] for prefix in results if prefix.get("prefix") and is_eligible_prefix(prefix)]
        self.job.logger.debug(
            "Retrieved %s prefixes for %s %s from IPAM %s",
            len(eligible),
            self.dimension.name,
            key,
            self.api_client.get_hostname(),
        )
        return eligible

    def load_security_group(self, key: str):
        """Load the desired security group of a single grouping key."""
        self.job.logger.debug("Processing %s: %s...", self.dimension.name, key)
        cidrs = self.load_prefixes(key)
        group = self.security_group(
            name=group_name(self.dimension, key),
            ip_addresses=sort_prefixes(cidrs),
            key=key,
            scope=self.dimension.scope_tag,
            description=GROUP_DESCRIPTION,
        )
        try:
            self.add(group)
        except ObjectAlreadyExists:
            self.job.logger.warning("Duplicate %s %s in choice set, loading it once.", self.dimension.name, key)

    def load(self):
        """Load the desired security groups from NetBox."""
        self.job.logger.debug("Processing %s groups...", self.dimension.scope_tag)
        self.keys = self.load_grouping_keys()
        self.job.sync.keys = list(self.keys)
        self.job.logger.info(
            "Loaded %s %s keys from IPAM %s.", len(self.keys), self.dimension.name, self.api_client.get_hostname()
        )

        for key in self.keys:
            if not self.process_keys:
                continue
            try:
                self.load_security_group(key)
            except Exception as err:  # pylint: disable=broad-except
                self.job.logger.error(
                    "Failed to process %s %s, skipping to next %s",
                    self.dimension.name,
                    key,
                    self.dimension.name,
                    extra={"component": "adapter", "method": "load", "key": key, "error": str(err)},
                )
                self.job.record_failure(key, UpstreamFetchFailure(SYSTEM_IPAM, str(err)))

        self.job.logger.debug("Cleaning up %s array (%s processed)", self.dimension.name, len(self.keys))
        self.keys.clear()
