"""Infrastructure Layer: Contains concrete implementations and adapters.

Connects the library to the outside world (HTTP, configuration files,
console output) and holds the resilience services (retry, rate limiting,
error normalization).
"""
