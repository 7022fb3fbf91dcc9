"""Deterministic scoring and recommendation core."""
