"""Shared helpers: date layouts and ISO reference code tables."""
