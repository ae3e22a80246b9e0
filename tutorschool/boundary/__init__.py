"""Boundary adapters: database and external HTTP services."""
