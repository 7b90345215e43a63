"""Units of measure, value predicates and LOWESS smoothing for time series."""

__version__ = "0.1.0"
__all__ = ["errors", "units", "where", "lowess"]