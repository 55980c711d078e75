"""Core Application Layer: query building, endpoints and resources.

Connects the domain models with the infrastructure executor. Contains the
fluent QueryBuilder, the per-entity resource wrappers and the client.
"""
