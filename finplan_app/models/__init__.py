"""
Data models and contracts module.

Immutable value objects handed to the presentation layer: price analyses,
forecast points and composed investment plans.
"""
