"""API and lifecycle data models."""
