"""
Chefbook exceptions.

Services and data-access functions raise these instead of returning
``None`` sentinels; the application maps them onto HTTP status codes.
"""

from typing import Any


class ChefbookError(Exception):
    """
    Base exception for all Chefbook errors.

    Usage:
        raise NotFoundError('INGREDIENT_NOT_FOUND', id=7)

    Attributes:
        code: Error code (CHEF_NOT_FOUND, STORAGE_FAILURE, etc.)
        details: Additional context as keyword arguments
    """

    status_code = 500

    def __init__(self, code: str, message: str = "", **details: Any):
        self.code = code
        self.message = message or code
        self.details = details
        super().__init__(self.message)

    def as_dict(self) -> dict:
        """Return error as dictionary for API responses."""
        return {"code": self.code, **self.details}

    def __str__(self) -> str:
        if self.details:
            details_str = ", ".join(
                f"{k}={v}" for k, v in self.details.items()
            )
            return f"{type(self).__name__}({self.code}: {details_str})"
        return f"{type(self).__name__}({self.code})"


class NotFoundError(ChefbookError):
    """A lookup by id found no row."""

    status_code = 404


class InvalidDataError(ChefbookError):
    """Input rejected before or by storage (bad reference, duplicate)."""

    status_code = 400


class StorageError(ChefbookError):
    """Any other failure in the data-access layer."""

    status_code = 500


# Error codes
# CHEF_NOT_FOUND / INGREDIENT_NOT_FOUND / RECIPE_NOT_FOUND
# AUTHOR_NOT_FOUND: recipe references a chef id that does not exist
# INTEGRITY_VIOLATION: unique or foreign-key constraint rejected a write
# INVALID_PAGE_OPTIONS: page number or page size below 1
# STORAGE_FAILURE: database error while running a statement
# NO_ROW_INSERTED: insert completed without producing an id
