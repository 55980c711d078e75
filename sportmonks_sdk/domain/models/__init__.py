"""Domain models: query options, retry policy and response envelopes."""
