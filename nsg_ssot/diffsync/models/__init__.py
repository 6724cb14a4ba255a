"""DiffSync models for the IPAM to NAM security group SSoT."""

from nsg_ssot.diffsync.models.nam import NAMSecurityGroup
from nsg_ssot.diffsync.models.netbox import NetboxSecurityGroup

__all__ = ("NAMSecurityGroup", "NetboxSecurityGroup")
