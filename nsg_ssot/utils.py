"""Utility functions for the IPAM to NAM security group SSoT."""

import ipaddress
import logging
from typing import Iterable, List

import httpx

from nsg_ssot.constants import (
    CONSUMER,
    ENVIRONMENT,
    EXCLUDED_STATUS,
    PLACEHOLDER_CHOICE,
    SYSTEM_IPAM,
    VRF_NAME,
    Dimension,
)
from nsg_ssot.exceptions import ConfigurationMissing, UpstreamFetchFailure

logger = logging.getLogger("nsg_ssot")


def get_grouping_keys(ipam, custom_field_name: str, method: str = "get_grouping_keys") -> List[str]:
    """Get the grouping keys listed in the choice set of a NetBox custom field.

    Args:
        ipam (NetboxClient): NetBox client.
        custom_field_name (str): Name of the custom field, e.g. `domain` or `env`.
        method (str): Name of the calling helper, used in log messages.

    Raises:
        UpstreamFetchFailure: Custom fields or the choice set could not be retrieved.
        ConfigurationMissing: The custom field or its choice set does not exist.

    Returns:
        List[str]: Choice values in choice set order, without the `na` placeholder.
    """
    try:
        custom_fields = ipam.custom_fields.get_custom_fields() or {}
    except httpx.HTTPError as err:
        logger.error(
            "Could not retrieve custom fields from IPAM %s due to %s",
            ipam.get_hostname(),
            err,
            extra={"component": "utils", "method": method, "error": str(err)},
        )
        raise UpstreamFetchFailure(SYSTEM_IPAM, str(err)) from err

    custom_field = next(
        (field for field in custom_fields.get("results", []) if field.get("name") == custom_field_name), None
    )
    if custom_field is None:
        raise ConfigurationMissing(f"custom field '{custom_field_name}' on IPAM {ipam.get_hostname()}")

    choice_set = custom_field.get("choice_set")
    if not isinstance(choice_set, dict) or choice_set.get("id") is None:
        raise ConfigurationMissing(f"choice set of custom field '{custom_field_name}' on IPAM {ipam.get_hostname()}")

    try:
        choices = ipam.custom_fields.get_custom_field_choice_set(choice_set["id"])
    except httpx.HTTPError as err:
        logger.error(
            "Could not retrieve custom field choice set from IPAM %s due to %s",
            ipam.get_hostname(),
            err,
            extra={"component": "utils", "method": method, "error": str(err)},
        )
        raise UpstreamFetchFailure(SYSTEM_IPAM, str(err)) from err
    if not choices:
        raise ConfigurationMissing(f"choice set {choice_set['id']} on IPAM {ipam.get_hostname()}")

    values = [choice[0] for choice in choices.get("extra_choices") or [] if choice and choice[0] != PLACEHOLDER_CHOICE]
    return list(dict.fromkeys(values))


def get_netbox_domains(ipam) -> List[str]:
    """Get the domains defined by the `domain` custom field choice set."""
    return get_grouping_keys(ipam, CONSUMER.custom_field_name, method="get_netbox_domains")


def get_netbox_environments(ipam) -> List[str]:
    """Get the environments defined by the `env` custom field choice set."""
    return get_grouping_keys(ipam, ENVIRONMENT.custom_field_name, method="get_netbox_environments")


def is_eligible_prefix(prefix: dict) -> bool:
    """Check whether a NetBox prefix may be a security group member.

    Only prefixes in the `nhc` VRF that are not containers qualify. VRF and status must be
    expanded objects; bare ids can't be checked and are treated as ineligible.
    """
    vrf = prefix.get("vrf")
    status = prefix.get("status")
    if not isinstance(vrf, dict) or not isinstance(status, dict):
        return False
    return vrf.get("name") == VRF_NAME and status.get("value") != EXCLUDED_STATUS


def group_name(dimension: Dimension, key: str) -> str:
    """Build the NAM security group name for a grouping key, e.g. `nsg-consumer-acme`."""
    return f"{dimension.group_name_prefix}-{key}"


def group_key(dimension: Dimension, name: str) -> str:
    """Inverse of `group_name`."""
    return name[len(dimension.group_name_prefix) + 1 :]


def _prefix_sort_key(cidr: str):
    try:
        network = ipaddress.ip_network(cidr, strict=False)
    except ValueError:
        return (1, 0, 0, 0, cidr)
    return (0, network.version, int(network.network_address), network.prefixlen, cidr)


def sort_prefixes(cidrs: Iterable[str]) -> List[str]:
    """De-duplicate and order CIDR strings by IP version, then network address and length.

    Strings that don't parse as an IP network are kept and sorted after all valid ones.
    """
    return sorted(set(cidrs), key=_prefix_sort_key)
