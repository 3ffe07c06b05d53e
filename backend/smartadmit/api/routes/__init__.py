# API Routes Module
from smartadmit.api.routes import (
    scoring,
    recommendations,
)

__all__ = [
    "scoring",
    "recommendations",
]
