"""Tests for security group SSoT utilities."""

import unittest

from nsg_ssot.constants import CONSUMER, ENVIRONMENT
from nsg_ssot.exceptions import ConfigurationMissing, UpstreamFetchFailure
from nsg_ssot.utils import (
    get_grouping_keys,
    get_netbox_domains,
    get_netbox_environments,
    group_key,
    group_name,
    is_eligible_prefix,
    sort_prefixes,
)

from .fixtures import make_prefix
from .mocks import MockNetboxClient


class GroupingKeysTestCase(unittest.TestCase):
    """Test discovery of grouping keys from custom field choice sets."""

    def test_get_netbox_domains(self):
        """The `na` placeholder is never returned as a domain."""
        self.assertEqual(get_netbox_domains(MockNetboxClient()), ["acme"])

    def test_get_netbox_environments(self):
        """Environments keep their choice set order."""
        self.assertEqual(get_netbox_environments(MockNetboxClient()), ["prod", "test"])

    def test_duplicate_choices_are_returned_once(self):
        """Choice values are unique per dimension."""
        ipam = MockNetboxClient(choice_sets={10: {"id": 10, "extra_choices": [["acme", "Acme"], ["acme", "ACME"]]}})
        self.assertEqual(get_grouping_keys(ipam, "domain"), ["acme"])

    def test_empty_choice_set(self):
        """A choice set without extra choices yields no keys."""
        ipam = MockNetboxClient(choice_sets={10: {"id": 10, "extra_choices": None}})
        self.assertEqual(get_grouping_keys(ipam, "domain"), [])

    def test_missing_custom_field(self):
        """A custom field that doesn't exist raises ConfigurationMissing."""
        with self.assertRaises(ConfigurationMissing) as context:
            get_grouping_keys(MockNetboxClient(), "tenant")
        self.assertIn("tenant", context.exception.message)

    def test_custom_field_without_choice_set(self):
        """A custom field without choice set raises ConfigurationMissing."""
        with self.assertRaises(ConfigurationMissing):
            get_grouping_keys(MockNetboxClient(), "owner")

    def test_custom_fields_fetch_failure(self):
        """HTTP errors are logged and raised as UpstreamFetchFailure."""
        ipam = MockNetboxClient()
        ipam.custom_fields.fail = True
        with self.assertLogs("nsg_ssot", level="ERROR") as logs:
            with self.assertRaises(UpstreamFetchFailure) as context:
                get_netbox_domains(ipam)
        self.assertEqual(context.exception.system, "IPAM")
        self.assertEqual(logs.records[0].method, "get_netbox_domains")
        self.assertEqual(logs.records[0].component, "utils")

    def test_choice_set_fetch_failure(self):
        """A choice set that can't be fetched raises UpstreamFetchFailure."""
        ipam = MockNetboxClient(choice_sets={})
        with self.assertLogs("nsg_ssot", level="ERROR") as logs:
            with self.assertRaises(UpstreamFetchFailure):
                get_netbox_environments(ipam)
        self.assertIn("404", logs.records[0].error)


class PrefixEligibilityTestCase(unittest.TestCase):
    """Test the VRF and status filter of prefixes."""

    def test_eligible_prefix(self):
        """Active prefixes in the nhc VRF are eligible."""
        self.assertTrue(is_eligible_prefix(make_prefix("10.0.0.0/24")))
        self.assertTrue(is_eligible_prefix(make_prefix("10.0.0.0/24", status="reserved")))

    def test_container_prefix(self):
        """Containers are never eligible."""
        self.assertFalse(is_eligible_prefix(make_prefix("10.0.0.0/16", status="container")))

    def test_other_vrf(self):
        """Prefixes in another VRF, or without VRF, are not eligible."""
        self.assertFalse(is_eligible_prefix(make_prefix("10.0.0.0/24", vrf="global")))
        self.assertFalse(is_eligible_prefix(make_prefix("10.0.0.0/24", vrf=None)))

    def test_unexpanded_references(self):
        """VRF or status given as ids can't be checked and are not eligible."""
        self.assertFalse(is_eligible_prefix(make_prefix("10.0.0.0/24", vrf=1)))
        self.assertFalse(is_eligible_prefix(make_prefix("10.0.0.0/24", status=None)))


class NamingTestCase(unittest.TestCase):
    """Test security group naming."""

    def test_group_name(self):
        """Group names follow `<prefix>-<key>`."""
        self.assertEqual(group_name(CONSUMER, "acme"), "nsg-consumer-acme")
        self.assertEqual(group_name(ENVIRONMENT, "prod"), "nsg-environment-prod")

    def test_group_key(self):
        """The key is recovered from a generated name, dashes included."""
        self.assertEqual(group_key(CONSUMER, "nsg-consumer-acme-labs"), "acme-labs")
        self.assertEqual(group_key(ENVIRONMENT, group_name(ENVIRONMENT, "prod")), "prod")


class SortPrefixesTestCase(unittest.TestCase):
    """Test ordering of prefixes."""

    def test_sort_prefixes(self):
        """Prefixes are ordered numerically, IPv4 before IPv6, without duplicates."""
        self.assertEqual(
            sort_prefixes(["10.0.10.0/24", "2001:db8::/64", "10.0.2.0/24", "10.0.2.0/24", "10.0.2.0/23"]),
            ["10.0.2.0/23", "10.0.2.0/24", "10.0.10.0/24", "2001:db8::/64"],
        )

    def test_sort_invalid_prefixes_last(self):
        """Strings that aren't networks are kept after the valid ones."""
        self.assertEqual(sort_prefixes(["host-b", "10.0.0.1", "host-a"]), ["10.0.0.1", "host-a", "host-b"])
