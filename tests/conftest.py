"""Shared pytest configuration."""

pytest_plugins = ["seat_reservations.testing.fixtures"]
