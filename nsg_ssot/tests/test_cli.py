"""Tests for the command line entry point."""

import os
import unittest
from unittest import mock

from nsg_ssot import cli
from nsg_ssot.constants import CONSUMER, ENVIRONMENT
from nsg_ssot.exceptions import PerKeyFailure, UpstreamFetchFailure
from nsg_ssot.jobs import Sync

ENVIRONMENT_VARIABLES = {
    "NSG_SSOT_IPAM_URL": "https://netbox.example.com",
    "NSG_SSOT_IPAM_TOKEN": "abc",
    "NSG_SSOT_NAM_URL": "https://nam.example.com",
    "NSG_SSOT_NAM_TOKEN": "def",
}


@mock.patch("nsg_ssot.cli.configure_logging")
@mock.patch.dict(os.environ, ENVIRONMENT_VARIABLES)
class MainTestCase(unittest.TestCase):
    """Test `nsg-ssot`."""

    @mock.patch("nsg_ssot.cli.process_groups")
    def test_all_dimensions(self, process_groups, _configure_logging):
        """Both dimensions are reconciled by default."""
        process_groups.return_value = Sync(source="IPAM", target="NAM")
        self.assertEqual(cli.main([]), 0)

        dimensions = [call.args[2] for call in process_groups.call_args_list]
        self.assertEqual(dimensions, [CONSUMER, ENVIRONMENT])
        self.assertTrue(process_groups.call_args.kwargs["enabled"])
        self.assertFalse(process_groups.call_args.kwargs["dryrun"])

    @mock.patch("nsg_ssot.cli.process_groups")
    def test_options(self, process_groups, _configure_logging):
        """Command line options override the environment."""
        process_groups.return_value = Sync(source="IPAM", target="NAM")
        self.assertEqual(cli.main(["environment", "--dryrun", "--disable"]), 0)

        process_groups.assert_called_once()
        self.assertEqual(process_groups.call_args.args[2], ENVIRONMENT)
        self.assertFalse(process_groups.call_args.kwargs["enabled"])
        self.assertTrue(process_groups.call_args.kwargs["dryrun"])

    @mock.patch("nsg_ssot.cli.process_groups")
    def test_per_key_failure_exit_code(self, process_groups, _configure_logging):
        """Failed keys make the run exit non-zero."""
        sync = Sync(source="IPAM", target="NAM")
        sync.failures.append(PerKeyFailure("acme", UpstreamFetchFailure("IPAM", "timed out")))
        process_groups.return_value = sync
        with self.assertLogs("nsg_ssot", level="WARNING"):
            self.assertEqual(cli.main(["consumer"]), 1)

    @mock.patch("nsg_ssot.cli.process_groups")
    def test_fatal_failure_continues_with_next_dimension(self, process_groups, _configure_logging):
        """A dimension that can't be processed doesn't prevent the next one."""
        process_groups.side_effect = [UpstreamFetchFailure("NAM", "unreachable"), Sync(source="IPAM", target="NAM")]
        with self.assertLogs("nsg_ssot", level="ERROR"):
            self.assertEqual(cli.main(["all"]), 1)
        self.assertEqual(process_groups.call_count, 2)

    def test_missing_configuration(self, _configure_logging):
        """Missing connection settings exit before any request."""
        with mock.patch.dict(os.environ, {"NSG_SSOT_NAM_TOKEN": ""}):
            with self.assertLogs("nsg_ssot", level="ERROR"):
                self.assertEqual(cli.main([]), 2)
