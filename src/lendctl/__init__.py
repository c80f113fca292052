"""lendctl — library lending records on a relational datastore."""

__version__ = "0.1.0"
