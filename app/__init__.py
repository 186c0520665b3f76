"""Realtime chat and notification delivery service."""
