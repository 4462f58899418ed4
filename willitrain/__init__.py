"""Will It Rain: historical weather likelihoods and activity guidance."""

__version__ = "1.0.0"
