"""cleanctl — Clean Architecture scaffolding for Go projects."""

__version__ = "0.3.0"
