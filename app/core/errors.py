# app/core/errors.py

from fastapi import status


class AppError(Exception):
    """Base error for every failure the API reports on purpose."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    kind = "error"

    def __init__(self, message: str, *, error: str | None = None):
        super().__init__(message)
        self.message = message
        self.error = error

    def to_dict(self) -> dict:
        body = {"detail": self.message, "kind": self.kind}
        if self.error:
            body["error"] = self.error
        return body


class ValidationError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    kind = "validation"


class DuplicateProductError(ValidationError):
    def __init__(self, product_ids: list[int]):
        super().__init__(
            "Cannot create a sale with a repeated product",
            error=f"Repeated product ids: {product_ids}",
        )
        self.product_ids = product_ids


class InsufficientStockError(ValidationError):
    def __init__(self, product_id: int, available: int, requested: int):
        super().__init__(
            f"Insufficient stock for product {product_id}",
            error=f"available={available} requested={requested}",
        )
        self.product_id = product_id


class NotFoundError(AppError):
    """
    Raised by services for an unknown id. Routers answer it with an empty
    result instead of an error status.
    """

    kind = "not_found"


class StorageError(AppError):
    kind = "storage"

    @classmethod
    def wrap(cls, message: str, exc: Exception) -> "StorageError":
        return cls(message, error=str(exc))
