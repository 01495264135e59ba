"""ValidationReport — structured result of validating a game, category, or answer."""

from typing import Literal, TypeAlias

from pydantic import BaseModel, ConfigDict, Field

Severity: TypeAlias = Literal["error", "warning"]


class ValidationIssue(BaseModel):
    """One problem found during validation, located by a dotted path."""

    model_config = ConfigDict(frozen=True)

    path: str
    message: str
    severity: Severity = "error"

    def __str__(self) -> str:
        return f"{self.path}: {self.message}"


class ValidationReport(BaseModel):
    """Ordered list of validation issues.

    Errors make the validated structure invalid; warnings are advisory.
    """

    issues: list[ValidationIssue] = Field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    @property
    def errors(self) -> list[ValidationIssue]:
        return [issue for issue in self.issues if issue.severity == "error"]

    @property
    def warnings(self) -> list[ValidationIssue]:
        return [issue for issue in self.issues if issue.severity == "warning"]

    def add(self, path: str, message: str, severity: Severity = "error") -> None:
        self.issues.append(ValidationIssue(path=path, message=message, severity=severity))
