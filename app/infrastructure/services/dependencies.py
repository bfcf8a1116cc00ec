"""
Type aliases for FastAPI dependency injection.

Provides annotated type hints for common infrastructure dependencies.
"""

from typing import Annotated
from fastapi import Depends
from infrastructure.rendering import Responder, get_responder

# Responder of the current request, attached by the renderer middleware
# Usage: return await respond.status(404)("errors/404.html")
ResponderDep = Annotated[Responder, Depends(get_responder)]

__all__ = [
    "ResponderDep",
]
