"""Settings describing how the external test runner is invoked."""

from typing import Self

from pydantic import BaseModel, ConfigDict, Field, model_validator


class RunnerSettings(BaseModel):
    """Calling convention of the external test runner."""

    model_config = ConfigDict(frozen=True)

    script_relative_path: str = "tools/load_tests.py"
    spec_env_var: str = "TEST_SPECS"
    size_env_var: str = "MAX_TEST_SIZE"
    max_test_size: str = "huge"

    @model_validator(mode="after")
    def check_distinct_env_vars(self) -> Self:
        """The spec and size variables must not overwrite each other."""
        if self.spec_env_var == self.size_env_var:
            raise ValueError(
                f"spec_env_var and size_env_var must differ, "
                f"both are '{self.spec_env_var}'"
            )
        return self


class ProducerConfig(BaseModel):
    """Base configuration shared by all producer plugins."""

    runner: RunnerSettings = Field(default_factory=RunnerSettings)
