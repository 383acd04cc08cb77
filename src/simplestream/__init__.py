"""Query the Ubuntu cloud image simplestreams catalog."""

__version__ = "0.1.0"
