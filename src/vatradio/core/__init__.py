"""Core services: event bus, configuration, logging and session identity."""
