from __future__ import annotations

from collections.abc import Iterable
from typing import Any


class AppError(Exception):
    status_code = 400
    default_detail: Any = "Bad request."

    def __init__(self, detail: Any | None = None) -> None:
        self.detail = self.default_detail if detail is None else detail
        super().__init__(str(self.detail))


class InvalidRequestError(AppError):
    status_code = 422
    default_detail = "Invalid request."


class EmptySampleError(AppError):
    status_code = 422
    default_detail = "Sample has no non-missing values."


class MismatchedLengthError(AppError):
    status_code = 422
    default_detail = "Parallel sequences must have the same length."

    @classmethod
    def for_sequences(
        cls,
        left_name: str,
        left: int,
        right_name: str,
        right: int,
    ) -> MismatchedLengthError:
        return cls(f"{left_name} has {left} items but {right_name} has {right}.")


LengthMismatchError = MismatchedLengthError


class MissingColumnError(AppError):
    status_code = 422
    default_detail = "Table is missing required columns."

    def __init__(self, columns: Iterable[str]) -> None:
        self.columns = list(columns)
        super().__init__(f"Missing required columns: {', '.join(self.columns)}")


class UnexpectedError(AppError):
    status_code = 500
    default_detail = "An unexpected error occurred. Please try again later."
