"""Infrastructure layer — database engine, schema, and persistence adapters.

This layer depends on stdlib, third-party libs (SQLAlchemy), and the
domain layer's entities, errors, and ports. It must never import from
services, commands, or output.
"""
