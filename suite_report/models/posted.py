"""Model of the raw result fields posted by the test runner."""

from collections.abc import Sequence

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


def posted_name(name: str, field_name: str) -> AliasChoices:
    """Accept a field under its posted name or its Python name."""
    return AliasChoices(name, field_name)


class PostedResults(BaseModel):
    """Result fields exactly as posted, before any interpretation."""

    model_config = ConfigDict(frozen=True)

    result: str = Field(..., description="Overall status, e.g. 'passed' or 'failed'")
    total_time: str = Field(
        ...,
        validation_alias=posted_name("totalTime", "total_time"),
        description="Run duration as displayed by the runner",
    )
    num_test_passes: str = Field(
        ..., validation_alias=posted_name("numTestPasses", "num_test_passes")
    )
    num_test_failures: str = Field(
        ..., validation_alias=posted_name("numTestFailures", "num_test_failures")
    )
    num_command_passes: str = Field(
        ..., validation_alias=posted_name("numCommandPasses", "num_command_passes")
    )
    num_command_failures: str = Field(
        ...,
        validation_alias=posted_name("numCommandFailures", "num_command_failures"),
    )
    num_command_errors: str = Field(
        ..., validation_alias=posted_name("numCommandErrors", "num_command_errors")
    )
    suite: str = Field(..., description="Suite table markup")
    test_tables: Sequence[str] = Field(
        default_factory=list,
        validation_alias=posted_name("testTables", "test_tables"),
        description="One rendered result table per executed test",
    )
