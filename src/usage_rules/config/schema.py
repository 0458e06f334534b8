"""Pydantic models for usage-rules configuration."""

from pydantic import BaseModel, Field, field_validator


class SettingsConfig(BaseModel):
    """Global settings for dependency discovery."""

    rules_filename: str = Field(
        default="usage-rules.md",
        description="Name of the rules file looked up in each dependency",
    )
    deps_dirs: list[str] = Field(
        default=["deps"],
        description="Directories whose sub-directories are dependencies",
    )
    include_installed: bool = Field(
        default=False,
        description="Also treat installed Python distributions as dependencies",
    )

    @field_validator("rules_filename")
    @classmethod
    def validate_rules_filename(cls, v: str) -> str:
        """Validate the rules filename is a bare file name."""
        if not v or "/" in v or "\\" in v:
            raise ValueError("rules_filename must be a file name, not a path")
        return v


class UsageRulesConfig(BaseModel):
    """Root configuration for usage-rules."""

    version: str = Field(description="Config schema version")
    settings: SettingsConfig = Field(default_factory=SettingsConfig)
    dependencies: dict[str, str] = Field(
        default_factory=dict,
        description="Explicit dependency name to directory entries",
    )

    @field_validator("version")
    @classmethod
    def validate_version(cls, v: str) -> str:
        """Validate version format."""
        if not v.startswith("1."):
            raise ValueError(
                f"Unsupported config version: {v}. Only version 1.x is supported."
            )
        return v

    @field_validator("dependencies")
    @classmethod
    def validate_dependency_names(cls, v: dict[str, str]) -> dict[str, str]:
        """Reject names that cannot be used in block markers."""
        for name in v:
            if not name or any(c.isspace() for c in name):
                raise ValueError(f"Invalid dependency name: {name!r}")
        return v
