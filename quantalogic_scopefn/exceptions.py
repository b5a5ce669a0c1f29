# quantalogic_scopefn/exceptions.py
from typing import Any


class DuplicationError(TypeError):
    def __init__(self, subject: Any, original_exception: Exception) -> None:
        self.subject_type: str = type(subject).__name__
        self.original_exception: Exception = original_exception
        self.message = f"Cannot duplicate a '{self.subject_type}' for a value-semantics scope call"
        super().__init__(self.message)

    def __str__(self):
        exc_type = type(self.original_exception).__name__
        return f"{self.message} ({exc_type}: {self.original_exception})"
