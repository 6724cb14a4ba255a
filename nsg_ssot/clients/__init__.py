"""NetBox and NAM API client package."""

from nsg_ssot.clients.client import APIClient, NAMClient, NetboxClient
from nsg_ssot.clients.custom_fields import CustomFieldsAPI
from nsg_ssot.clients.nsx_security_groups import NsxSecurityGroupsAPI
from nsg_ssot.clients.prefixes import PrefixesAPI

__all__ = (
    "APIClient",
    "CustomFieldsAPI",
    "NAMClient",
    "NetboxClient",
    "NsxSecurityGroupsAPI",
    "PrefixesAPI",
)
