"""Identity domain model.

Aggregates, embedded value objects and the in-memory managers that keep
their collections consistent. Nothing in this package performs I/O.
"""
