"""NAM adapter for the security group SSoT."""

import httpx
from diffsync import Adapter
from diffsync.exceptions import ObjectAlreadyExists

from nsg_ssot.constants import SYSTEM_NAM, Dimension
from nsg_ssot.diffsync.models.nam import NAMSecurityGroup
from nsg_ssot.exceptions import UpstreamFetchFailure
from nsg_ssot.utils import group_key, sort_prefixes


class NAMAdapter(Adapter):
    """DiffSync adapter for the NSX security groups currently defined in NAM."""

    security_group = NAMSecurityGroup
    top_level = ["security_group"]

    def __init__(self, job, api_client, dimension: Dimension, *args, **kwargs):
        """Initialize NAM adapter.

        Args:
            job (SecurityGroupSync): Job running the sync, used for logging and failure tracking.
            api_client (NAMClient): NAM client.
            dimension (Dimension): Grouping dimension whose security groups are loaded.
        """
        super().__init__(*args, **kwargs)
        self.job = job
        self.api_client = api_client
        self.dimension = dimension

    def load(self):
        """Load the security groups of the dimension from NAM with a single list call."""
        try:
            groups = self.api_client.nsx_security_groups.get_nsx_security_groups() or {}
        except httpx.HTTPError as err:
            self.job.logger.error(
                "Could not retrieve NSX Security Groups from NAM %s due to %s",
                self.api_client.get_hostname(),
                err,
                extra={"component": "adapter", "method": "load", "error": str(err)},
            )
            raise UpstreamFetchFailure(SYSTEM_NAM, str(err)) from err

        prefix = f"{self.dimension.group_name_prefix}-"
        for nsg in groups.get("results", []):
            name = nsg.get("name") or ""
            if not name.startswith(prefix):
                continue
            members = [member.get("ip") for member in nsg.get("ipAddresses") or [] if member.get("ip")]
            self.job.logger.debug(
                "Retrieved %s prefixes for NSX Security Group '%s' from NAM %s",
                len(members),
                name,
                self.api_client.get_hostname(),
            )
            group = self.security_group(
                name=name,
                ip_addresses=sort_prefixes(members),
                key=group_key(self.dimension, name),
                scope=nsg.get("scope"),
                description=nsg.get("desc"),
                uuid=str(nsg["_id"]) if nsg.get("_id") is not None else None,
            )
            try:
                self.add(group)
            except ObjectAlreadyExists:
                self.job.logger.warning("Duplicate NSX Security Group '%s' on NAM, keeping the first one.", name)
