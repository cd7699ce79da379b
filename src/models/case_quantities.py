"""Case quantity and usage factor models.

Meat is ordered in two size classes (large and small). Every derived total in
the planner is a pair of case counts, one per size class.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from src.config.constants import (
    SALES_UNIT_DOLLARS,
    USAGE_LARGE_CASES_PER_1K,
    USAGE_SMALL_CASES_PER_1K,
)


class SizeClass(str, Enum):
    """Meat size class."""
    LARGE = "large"
    SMALL = "small"

    def __str__(self) -> str:
        return self.value


class CaseQuantities(BaseModel):
    """Case counts for both size classes."""
    large: float = Field(default=0.0, ge=0, description="Cases of large meat")
    small: float = Field(default=0.0, ge=0, description="Cases of small meat")

    model_config = ConfigDict(frozen=True)

    def get(self, size: SizeClass) -> float:
        return self.large if SizeClass(size) == SizeClass.LARGE else self.small

    def rounded(self, decimals: int) -> "CaseQuantities":
        """Copy with both quantities rounded for display."""
        return CaseQuantities(large=round(self.large, decimals), small=round(self.small, decimals))

    def __str__(self) -> str:
        return f"large={self.large:.2f}, small={self.small:.2f}"


class UsageFactors(BaseModel):
    """
    Cases of meat consumed per $1,000 of sales.

    Usage factors are locked process-wide configuration; the UI shows them
    but never lets the user change them.

    Attributes:
        large: Cases of large meat per $1,000 of sales (default: 0.64)
        small: Cases of small meat per $1,000 of sales (default: 0.15)
    """
    large: float = Field(
        default=USAGE_LARGE_CASES_PER_1K,
        description="Cases of large meat per $1,000 of sales",
        ge=0
    )
    small: float = Field(
        default=USAGE_SMALL_CASES_PER_1K,
        description="Cases of small meat per $1,000 of sales",
        ge=0
    )

    model_config = ConfigDict(frozen=True)

    def cases_for_sales(self, sales: float) -> CaseQuantities:
        """
        Convert a sales amount into required cases.

        Args:
            sales: Sales in dollars

        Returns:
            Required cases of each size class
        """
        thousands = sales / SALES_UNIT_DOLLARS
        return CaseQuantities(large=thousands * self.large, small=thousands * self.small)


DEFAULT_USAGE_FACTORS = UsageFactors()
