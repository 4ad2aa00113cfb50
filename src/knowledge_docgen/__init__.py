"""knowledge-docgen: enum and SQL schema knowledge documents for retrieval indexes."""
__version__ = "0.1.0"
