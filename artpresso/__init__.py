"""Artpresso: artwork price estimator."""
