"""
Price data ingestion and normalization module.

Handles throttled provider calls, classification of provider responses and
normalization of daily series into canonical OHLCV points.
"""
