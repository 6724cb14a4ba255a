"""NAM NSX Security Groups API module."""

from typing import Any, Dict

from .base import BaseResource


class NsxSecurityGroupsAPI(BaseResource):
    """NAM NSX Security Groups API resource."""

    path = "/api/v2/nsx/securitygroups"

    def get_nsx_security_groups(self) -> Dict[str, Any]:
        """GET /api/v2/nsx/securitygroups - Get all NSX security groups."""
        resp = self._client.get(self.path)
        return self._handle_response(resp)

    def add_nsx_security_group(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """POST /api/v2/nsx/securitygroups - Create an NSX security group."""
        resp = self._client.post(self.path, json=data)
        return self._handle_response(resp)

    def patch_nsx_security_group(self, group_id: str, data: Dict[str, Any]) -> Dict[str, Any]:
        """PATCH /api/v2/nsx/securitygroups/{id} - Update fields of an NSX security group."""
        resp = self._client.patch(f"{self.path}/{group_id}", json=data)
        return self._handle_response(resp)
