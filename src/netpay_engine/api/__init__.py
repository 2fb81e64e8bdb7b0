"""HTTP API for the net pay estimator."""
