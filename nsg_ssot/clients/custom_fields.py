"""NetBox Custom Fields API module."""

from typing import Any, Dict

from .base import BaseResource


class CustomFieldsAPI(BaseResource):
    """NetBox Custom Fields API resource."""

    def get_custom_fields(self) -> Dict[str, Any]:
        """GET /api/extras/custom-fields/ - Get all custom field definitions."""
        resp = self._client.get("/api/extras/custom-fields/", params={"limit": 0})
        return self._handle_response(resp)

    def get_custom_field_choice_set(self, choice_set_id: int) -> Dict[str, Any]:
        """GET /api/extras/custom-field-choice-sets/{id}/ - Get a custom field choice set."""
        resp = self._client.get(f"/api/extras/custom-field-choice-sets/{choice_set_id}/")
        return self._handle_response(resp)
