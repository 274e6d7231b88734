"""
Salary Range Value Object
Immutable salary range with validation
"""
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class SalaryRange:
    """Advertised salary range for a posting"""

    min_salary: Optional[int] = None
    max_salary: Optional[int] = None
    currency: str = "USD"

    def __post_init__(self):
        """Validate salary range"""
        if self.min_salary is not None and self.min_salary < 0:
            raise ValueError("Minimum salary cannot be negative")

        if self.max_salary is not None:
            if self.max_salary < 0:
                raise ValueError("Maximum salary cannot be negative")
            if self.min_salary is not None and self.max_salary < self.min_salary:
                raise ValueError("Maximum salary cannot be less than minimum salary")

    def __str__(self) -> str:
        if self.min_salary is not None and self.max_salary is not None:
            return f"{self.currency} {self.min_salary:,} - {self.max_salary:,}"
        if self.min_salary is not None:
            return f"{self.currency} {self.min_salary:,}+"
        if self.max_salary is not None:
            return f"up to {self.currency} {self.max_salary:,}"
        return "Not specified"
