"""Domain Interfaces (Ports):

Defines the contracts (Abstract Base Classes) that infrastructure components
must implement. Core request logic depends on these interfaces, not
concrete implementations.
"""
