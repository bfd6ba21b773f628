"""Domain Layer: entities, value objects, errors and collaborator contracts.

Nothing in this package performs I/O; core services depend on the
interfaces defined here, never on concrete adapters.
"""
