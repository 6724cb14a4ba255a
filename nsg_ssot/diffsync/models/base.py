"""DiffSyncModel subclasses for IPAM-to-NAM security group sync."""

from typing import List, Optional

from diffsync import DiffSyncModel


class SecurityGroup(DiffSyncModel):
    """DiffSync model for NSX security groups.

    Only the membership is compared, so a group is updated exactly when a prefix has to be
    added or removed. `ip_addresses` is kept de-duplicated and sorted, making the comparison
    independent of the order either system returns members in.
    """

    _modelname = "security_group"
    _identifiers = ("name",)
    _attributes = ("ip_addresses",)

    name: str
    ip_addresses: List[str] = []

    key: Optional[str] = None
    scope: Optional[str] = None
    description: Optional[str] = None
    uuid: Optional[str] = None
