"""Service layer — business rules returning LibraryActionResult.

Services may import from domain and infrastructure layers.
They must never import from commands or output.
"""
