"""NetBox IPAM DiffSync models."""

from nsg_ssot.diffsync.models.base import SecurityGroup


class NetboxSecurityGroup(SecurityGroup):
    """Security group derived from NetBox prefix tags. NetBox is only ever the source."""

    @classmethod
    def create(cls, adapter, ids, attrs):
        """Create security group in NetBox."""
        raise NotImplementedError

    def update(self, attrs):
        """Update security group in NetBox."""
        raise NotImplementedError

    def delete(self):
        """Delete security group in NetBox."""
        raise NotImplementedError
