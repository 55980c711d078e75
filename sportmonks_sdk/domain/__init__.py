"""Domain Layer: value objects, envelope models, errors and ports.

Nothing in here performs I/O. Infrastructure adapters implement the
interfaces defined in ``domain.interfaces``.
"""
