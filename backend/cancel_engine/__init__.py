"""Cancellation Engine - subscription cancellation letter generator."""
