"""
Email Value Object
Immutable contact email with validation
"""
import re
from dataclasses import dataclass


_EMAIL_PATTERN = re.compile(r'^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$')


@dataclass(frozen=True)
class Email:
    """Email value object with validation"""

    value: str

    def __post_init__(self):
        if not self.is_valid(self.value):
            raise ValueError(f"Invalid email format: {self.value}")

    @classmethod
    def parse(cls, raw: str) -> "Email":
        """Trim surrounding whitespace before validating"""
        return cls((raw or "").strip())

    @staticmethod
    def is_valid(email: str) -> bool:
        return bool(email) and bool(_EMAIL_PATTERN.match(email))

    def __str__(self) -> str:
        return self.value
