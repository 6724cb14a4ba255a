"""NetBox Prefixes API module."""

from typing import Any, Dict, Optional

from .base import BaseResource


class PrefixesAPI(BaseResource):
    """NetBox Prefixes API resource."""

    def get_prefixes(self, filters: Optional[Dict[str, Any]] = None, expand_related: bool = True) -> Dict[str, Any]:
        """GET /api/ipam/prefixes/ - Get all prefixes matching the filters.

        Follows the `next` link of paginated responses so `results` holds every matching prefix.

        Args:
            filters: NetBox query filters, e.g. `{"cf_domain": "acme"}`.
            expand_related: Return related objects (VRF, status) nested instead of the brief representation.
        """
        params = {k: v for k, v in (filters or {}).items() if v is not None}
        if not expand_related:
            params["brief"] = "true"
        resp = self._client.get("/api/ipam/prefixes/", params=params)
        page = self._handle_response(resp) or {}
        results = list(page.get("results") or [])
        while page.get("next"):
            page = self._handle_response(self._client.get(page["next"])) or {}
            results.extend(page.get("results") or [])
        return {"count": len(results), "results": results}
