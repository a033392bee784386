"""Helpers shared by the unit, UI and E2E test suites."""
