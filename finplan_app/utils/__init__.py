"""
Utility functions module.

Calendar handling shared by the price normalizer, the forecast generator
and the historical interpolation helpers. Trading dates come from the
provider and are authoritative; wall-clock time only anchors forecasts.
"""
