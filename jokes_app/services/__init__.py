"""
Services layer - business logic that sits beside the controllers.
"""

from jokes_app.services.validation import ValidationResult, validate_joke

__all__ = [
    "ValidationResult",
    "validate_joke",
]
