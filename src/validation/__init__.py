"""Input validation for order planning."""

from .input_validator import (
    PlanInputValidator,
    ValidationIssue,
    ValidationSeverity,
    validate_plan_inputs,
)

__all__ = ["PlanInputValidator", "ValidationIssue", "ValidationSeverity", "validate_plan_inputs"]
