"""Radio registry for an air-traffic voice communication client."""

__version__ = "0.1.0"
