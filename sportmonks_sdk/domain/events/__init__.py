"""Domain Event definitions.

Represents significant occurrences during a request (attempts, retries,
failures) that callers may observe through an ``on_event`` hook.
"""
