"""Client for retrieving SSR entries over HTTP and consolidating them across environments."""

__version__ = "0.1.0"