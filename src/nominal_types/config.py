"""Define the Pydantic model configuring how a type hierarchy is validated."""

from __future__ import annotations

from enum import StrEnum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from nominal_types.diagnostics import DiagnosticKind
from nominal_types.io.yaml_utils import load_yaml_data


class CycleReporting(StrEnum):
    """Enumeration of strategies for reporting circular dependencies."""

    FIRST_FOUND = "first_found"
    """One search over the whole hierarchy; each discovered back edge is reported once."""

    PER_MEMBER = "per_member"
    """Every type is searched independently and reports the first cycle returning to it."""


class ValidationConfig(BaseModel):
    """Schema for the options controlling type hierarchy validation."""

    cycle_reporting: CycleReporting = Field(
        default=CycleReporting.FIRST_FOUND,
        description="Strategy used to report circular dependencies",
    )
    disabled_checks: set[DiagnosticKind] = Field(
        default_factory=set,
        description="Kinds of diagnostics that are not reported",
    )
    warnings_as_errors: bool = Field(
        default=False,
        description="Whether warnings should count as failures when summarizing a run",
    )

    model_config = ConfigDict(extra="forbid", frozen=True)

    @field_validator("disabled_checks")
    @classmethod
    def check_shape_not_disabled(cls, checks: set[DiagnosticKind]) -> set[DiagnosticKind]:
        """Validate that the top-level shape check is never disabled."""
        if DiagnosticKind.INVALID_SHAPE in checks:
            raise ValueError("The hierarchy shape check cannot be disabled.")
        return checks

    def is_enabled(self, kind: DiagnosticKind) -> bool:
        """Check whether diagnostics of the given kind should be reported."""
        return kind not in self.disabled_checks


def load_validation_config(yaml_path: Path) -> ValidationConfig:
    """Load and validate a validation configuration from a YAML file.

    :param yaml_path: Path to a YAML file containing the configuration
    :return: Validated configuration (an empty file yields the defaults)
    :raises RuntimeError: If the file's contents don't match the configuration schema
    """
    yaml_data = load_yaml_data(yaml_path) or {}

    try:
        return ValidationConfig.model_validate(yaml_data)
    except ValidationError as error:
        raise RuntimeError(f"Invalid validation config in {yaml_path}:\n{error}") from error
