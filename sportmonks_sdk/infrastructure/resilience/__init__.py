"""API Resilience Implementations.

Contains services for retrying failed requests with exponential backoff,
honouring rate-limit reset hints, normalizing failures into one error type
and (optionally) sharing a request budget between concurrent calls.
Bounded Context: API Resilience
"""
