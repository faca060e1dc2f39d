"""Demo and CLI configuration schemas."""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

OUTPUT_FORMATS = ("json", "yaml", "table", "list")


class DemoConfig(BaseModel):
    """Settings shared by the pattern demo drivers."""
    model_config = ConfigDict(extra="forbid")

    random_seed: Optional[int] = Field(None, description="Seed for demos that pick at random")
    load_balancer_requests: int = Field(
        15, ge=1, description="Requests dispatched by the singleton demo"
    )
    show_banner: bool = Field(True, description="Print a title line before each demo")


class CliConfig(BaseModel):
    """Command line presentation settings."""
    model_config = ConfigDict(extra="forbid")

    output_format: str = Field("table", description="Default output format")

    @field_validator("output_format")
    @classmethod
    def validate_output_format(cls, v: str) -> str:
        """
        Validate output format.

        Args:
            v: Value to validate

        Returns:
            Validated value

        Raises:
            ValueError: If the format is unknown
        """
        v = v.lower()
        if v not in OUTPUT_FORMATS:
            raise ValueError(f"Output format must be one of {list(OUTPUT_FORMATS)}")
        return v
