"""Helpers shared across the devices test suites."""
