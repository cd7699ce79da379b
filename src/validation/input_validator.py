"""Boundary validation for order planning inputs.

The planning engine itself never fails on user input: missing or invalid
inputs simply produce an empty window. This module explains to the user why
no plan is shown, and flags input combinations that are valid but likely to
produce a misleading plan.
"""

from dataclasses import dataclass
from datetime import date as Date
from enum import Enum
from typing import Any, Dict, List, Optional

from src.config.constants import SHELF_LIFE_DAYS
from src.planning.window import coerce_duration, days_to_arrive


class ValidationSeverity(Enum):
    """Severity levels for validation issues."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


@dataclass
class ValidationIssue:
    """Represents a single validation issue.

    Attributes:
        id: Unique identifier for the issue type
        category: Category of validation (e.g., "Completeness", "Dates")
        severity: Severity level (INFO, WARNING, ERROR)
        title: Short title describing the issue
        description: Detailed description of the issue
        fix_guidance: How to fix the issue
    """
    id: str
    category: str
    severity: ValidationSeverity
    title: str
    description: str
    fix_guidance: str = ""


class PlanInputValidator:
    """Validates delivery date and duration before a window is generated.

    Validates:
    - Completeness: delivery date and duration entered
    - Dates: delivery date not in the past
    - Duration: positive whole number of days
    - Shelf life: duration longer than the delivery can keep
    """

    #: Windows longer than this are allowed but flagged
    LONG_LEAD_TIME_DAYS = 60

    def __init__(self, delivery_date: Optional[Date], duration: Any, today: Date):
        """Initialize validator with the raw form inputs.

        Args:
            delivery_date: Requested delivery date (None if not chosen)
            duration: Duration as entered (int or text)
            today: Current date
        """
        self.delivery_date = delivery_date
        self.duration = duration
        self.today = today
        self.issues: List[ValidationIssue] = []

    def validate_all(self) -> List[ValidationIssue]:
        """Run all validation checks and return list of issues."""
        self.issues = []

        self.check_completeness()
        self.check_delivery_date()
        self.check_duration()
        self.check_shelf_life()

        return self.issues

    def check_completeness(self):
        """Report inputs that have not been entered yet."""
        if self.delivery_date is None:
            self.issues.append(ValidationIssue(
                id="INPUT_001",
                category="Completeness",
                severity=ValidationSeverity.INFO,
                title="No delivery date selected",
                description="Choose the date the new order will be delivered.",
            ))

        if self.duration is None or str(self.duration).strip() == "":
            self.issues.append(ValidationIssue(
                id="INPUT_002",
                category="Completeness",
                severity=ValidationSeverity.INFO,
                title="No duration entered",
                description="Enter how many days the new order must last.",
            ))

    def check_delivery_date(self):
        """Delivery must be today or later."""
        if self.delivery_date is None:
            return

        if self.delivery_date < self.today:
            self.issues.append(ValidationIssue(
                id="DATE_001",
                category="Dates",
                severity=ValidationSeverity.ERROR,
                title="Delivery date is in the past",
                description=f"Delivery date {self.delivery_date} is before today ({self.today}).",
                fix_guidance="Pick today or a later date.",
            ))
        elif days_to_arrive(self.delivery_date, self.today) > self.LONG_LEAD_TIME_DAYS:
            self.issues.append(ValidationIssue(
                id="DATE_002",
                category="Dates",
                severity=ValidationSeverity.WARNING,
                title="Delivery date is far out",
                description=(
                    f"Delivery is more than {self.LONG_LEAD_TIME_DAYS} days away; "
                    "every day until then needs a sales forecast."
                ),
            ))

    def check_duration(self):
        """Duration must be a positive whole number of days."""
        if self.duration is None or str(self.duration).strip() == "":
            return

        if coerce_duration(self.duration) is None:
            self.issues.append(ValidationIssue(
                id="DUR_001",
                category="Duration",
                severity=ValidationSeverity.ERROR,
                title="Invalid duration",
                description=f"Duration {self.duration!r} is not a positive whole number of days.",
                fix_guidance="Enter a whole number of days, 1 or more.",
            ))

    def check_shelf_life(self):
        """Flag orders meant to last longer than the product keeps."""
        duration = coerce_duration(self.duration)
        if duration is None:
            return

        # Delivery day plus duration days are covered by one delivery
        if duration + 1 > SHELF_LIFE_DAYS:
            self.issues.append(ValidationIssue(
                id="SL_001",
                category="Shelf Life",
                severity=ValidationSeverity.WARNING,
                title="Duration exceeds shelf life",
                description=(
                    f"The order must cover {duration + 1} days but meat keeps "
                    f"{SHELF_LIFE_DAYS} days from delivery."
                ),
                fix_guidance="Expect a waste warning or split the order into smaller deliveries.",
            ))

    def get_summary_stats(self) -> Dict[str, int]:
        """Count issues by severity."""
        return {
            severity.value: sum(1 for issue in self.issues if issue.severity == severity)
            for severity in ValidationSeverity
        }

    def has_errors(self) -> bool:
        return any(issue.severity == ValidationSeverity.ERROR for issue in self.issues)

    def is_ready_to_plan(self) -> bool:
        """True when both inputs are present and valid."""
        return not any(
            issue.severity in (ValidationSeverity.INFO, ValidationSeverity.ERROR)
            for issue in self.issues
        )


def validate_plan_inputs(delivery_date: Optional[Date], duration: Any, today: Date) -> List[ValidationIssue]:
    """Validate planning inputs. Never raises."""
    return PlanInputValidator(delivery_date, duration, today).validate_all()
