"""Concrete market data endpoints."""
