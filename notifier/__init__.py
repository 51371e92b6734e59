"""Notification preference and dispatch service package."""
