"""Weather-aware route planning on small undirected road networks."""

__version__ = "0.1.0"
