"""Constants for use within the IPAM to NAM security group SSoT."""

from collections import namedtuple

VRF_NAME = "nhc"
EXCLUDED_STATUS = "container"
PLACEHOLDER_CHOICE = "na"
GROUP_DESCRIPTION = "Managed by NAM"

SYSTEM_IPAM = "IPAM"
SYSTEM_NAM = "NAM"

DEFAULT_TIMEOUT = 30

Dimension = namedtuple(
    "Dimension", ["name", "custom_field_name", "filter_field_name", "group_name_prefix", "scope_tag"]
)
"""Grouping dimension a set of security groups is reconciled for.

* name: Human readable name of the dimension, used in log messages.
* custom_field_name: Name of the NetBox custom field whose choice set lists the grouping keys.
* filter_field_name: NetBox prefix filter used to select prefixes tagged with a key.
* group_name_prefix: Prefix of the generated security group name, `<group_name_prefix>-<key>`.
* scope_tag: Scope tag set on security groups created in NAM.
"""

CONSUMER = Dimension(
    name="domain",
    custom_field_name="domain",
    filter_field_name="cf_domain",
    group_name_prefix="nsg-consumer",
    scope_tag="consumer",
)

ENVIRONMENT = Dimension(
    name="environment",
    custom_field_name="env",
    filter_field_name="cf_env",
    group_name_prefix="nsg-environment",
    scope_tag="environment",
)

DIMENSIONS = {
    "consumer": CONSUMER,
    "environment": ENVIRONMENT,
}
