"""Shared constants and helpers with no service or model dependencies."""
