"""Core: configuration, errors, hashing, validation and request options.

The core never performs I/O; fetching is delegated to `gravatar_client.adapters`.
"""
