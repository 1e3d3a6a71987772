"""Client for submitting financial documents to the remote analysis service."""

__version__ = "0.1.0"
