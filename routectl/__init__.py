"""routectl: route and session orchestration on top of a platform REST API."""

__version__ = "0.1.0"
