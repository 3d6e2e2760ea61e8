"""Persistence adapters supplying log series to the engine."""
