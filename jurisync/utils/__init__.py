"""Shared utilities for the contract engine."""
