"""Shared utilities for the cab billing system."""
