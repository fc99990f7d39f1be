"""Adapters – transport integrations for the access-control core."""
