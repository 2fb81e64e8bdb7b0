"""Net pay estimator: progressive withholding and flat contribution."""

__version__ = "0.1.0"
