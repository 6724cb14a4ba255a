"""Unit tests for nsg_ssot."""
