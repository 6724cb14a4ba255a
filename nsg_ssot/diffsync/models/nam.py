"""NAM DiffSync models."""

from typing import List

from diffsync.exceptions import ObjectNotCreated, ObjectNotUpdated

from nsg_ssot.choices import ChangeTypeChoices
from nsg_ssot.constants import GROUP_DESCRIPTION, SYSTEM_IPAM, SYSTEM_NAM
from nsg_ssot.diffsync.models.base import SecurityGroup
from nsg_ssot.exceptions import UpstreamWriteFailure
from nsg_ssot.utils import group_key


def build_change_record(adapter, name: str, change_type: str, added: List[str], removed: List[str]) -> dict:
    """Build the change record logged alongside a security group write."""
    return {
        "name": name,
        "type": change_type,
        "src": {"system": SYSTEM_IPAM, "server": adapter.job.ipam.get_hostname()},
        "dst": {"system": SYSTEM_NAM, "server": adapter.api_client.get_hostname()},
        "changes": {"added": added, "removed": removed},
    }


def ip_address_records(ip_addresses: List[str]) -> List[dict]:
    """Wrap CIDR strings the way NAM expects security group members."""
    return [{"ip": ip_address} for ip_address in ip_addresses]


def write_failure(adapter, key: str, method: str, message: str) -> UpstreamWriteFailure:
    """Log a failed NAM write with its context and record it against its grouping key."""
    error = UpstreamWriteFailure(SYSTEM_NAM, message)
    adapter.job.logger.error(
        message, extra={"component": "model", "method": method, "key": key, "error": error.message}
    )
    adapter.job.record_failure(key, error)
    return error


class NAMSecurityGroup(SecurityGroup):
    """NSX security group managed through NAM."""

    @classmethod
    def create(cls, adapter, ids, attrs):
        """Create security group in NAM with the full desired membership."""
        dimension = adapter.dimension
        name = ids["name"]
        key = group_key(dimension, name)
        ip_addresses = attrs.get("ip_addresses", [])
        payload = {
            "name": name,
            "desc": GROUP_DESCRIPTION,
            "scope": dimension.scope_tag,
            "tag": key,
            "ipAddresses": ip_address_records(ip_addresses),
        }
        try:
            response = adapter.api_client.nsx_security_groups.add_nsx_security_group(payload)
        except Exception as err:  # pylint: disable=broad-except
            error = write_failure(
                adapter,
                key,
                "create",
                f"Failed to create NSX Security Group '{name}' for {dimension.name} {key}: {err}",
            )
            raise ObjectNotCreated(error) from err

        adapter.job.logger.info(
            "Created NSX Security Group '%s' from '%s' on '%s'.",
            name,
            adapter.job.ipam.get_hostname(),
            adapter.api_client.get_hostname(),
            extra={"change": build_change_record(adapter, name, ChangeTypeChoices.TYPE_CREATE, ip_addresses, [])},
        )
        group = super().create(adapter=adapter, ids=ids, attrs=attrs)
        group.key = key
        group.scope = dimension.scope_tag
        group.description = GROUP_DESCRIPTION
        if isinstance(response, dict) and response.get("_id") is not None:
            group.uuid = str(response["_id"])
        return group

    def update(self, attrs):
        """Replace the security group membership in NAM with the full desired set.

        The patch always carries every desired member; members no longer tagged in IPAM drop out
        because they are absent from the list, not through a separate removal call.
        """
        dimension = self.adapter.dimension
        key = self.key or group_key(dimension, self.name)
        desired = attrs.get("ip_addresses", self.ip_addresses)
        added = [ip for ip in desired if ip not in self.ip_addresses]
        removed = [ip for ip in self.ip_addresses if ip not in desired]

        if self.uuid is None:
            raise ObjectNotUpdated(
                write_failure(self.adapter, key, "update", f"NSX Security Group '{self.name}' has no id to update.")
            )
        payload = {"_id": self.uuid, "desc": GROUP_DESCRIPTION, "ipAddresses": ip_address_records(desired)}
        try:
            self.adapter.api_client.nsx_security_groups.patch_nsx_security_group(self.uuid, payload)
        except Exception as err:  # pylint: disable=broad-except
            error = write_failure(
                self.adapter,
                key,
                "update",
                f"Failed to update NSX Security Group '{self.name}' for {dimension.name} {key}: {err}",
            )
            raise ObjectNotUpdated(error) from err

        self.adapter.job.logger.info(
            "Updated NSX Security Group '%s' from '%s' on '%s' with %s added and %s removed prefixes.",
            self.name,
            self.adapter.job.ipam.get_hostname(),
            self.adapter.api_client.get_hostname(),
            len(added),
            len(removed),
            extra={
                "change": build_change_record(self.adapter, self.name, ChangeTypeChoices.TYPE_UPDATE, added, removed)
            },
        )
        return super().update(attrs)

    def delete(self):
        """Delete security group in NAM.

        Unmatched NAM groups are skipped during sync, so groups are never removed.
        """
        raise NotImplementedError
