"""DiffSync adapters for the IPAM to NAM security group SSoT."""

from nsg_ssot.diffsync.adapters.nam import NAMAdapter
from nsg_ssot.diffsync.adapters.netbox import NetboxAdapter

__all__ = ("NAMAdapter", "NetboxAdapter")
