"""Infrastructure Layer: concrete adapters for the domain interfaces.

Configuration, logging, console display, session persistence and the
loader for externally provided API clients.
"""
