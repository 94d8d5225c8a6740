"""
Application settings and configuration

Uses pydantic-settings for type-safe configuration via environment variables.
All settings use CSSMODJUMP_ prefix (e.g., CSSMODJUMP_CAMEL_CASE=dashes).

Settings can also be loaded from a .env file in the project root, and are
overridden per project by the project config file (see lib/project.py).
"""

from typing import Any, Dict

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..models.resolution import CamelCaseMode


WORKSPACE_FOLDER_VARIABLE = "${workspaceFolder}"


class AppSettings(BaseSettings):
    """
    Application configuration via environment variables.

    Environment variables use CSSMODJUMP_ prefix.

    Examples:
        CSSMODJUMP_CAMEL_CASE=true
        CSSMODJUMP_PATH_ALIAS='{"@styles": "${workspaceFolder}/src/styles"}'
        CSSMODJUMP_MAX_FILE_BYTES=262144
    """

    model_config = SettingsConfigDict(
        env_prefix="CSSMODJUMP_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Matching configuration
    camel_case: CamelCaseMode = Field(
        default=CamelCaseMode.NONE,
        description="Class-name transformation: none, camelcase (or true) or dashes",
    )

    # Path resolution configuration
    path_alias: Dict[str, str] = Field(
        default_factory=dict,
        description="Import path aliases; values may use ${workspaceFolder}",
    )

    use_tsconfig_paths: bool = Field(
        default=True,
        description="Also read aliases from compilerOptions.paths of tsconfig.json/jsconfig.json",
    )

    project_config_name: str = Field(
        default="cssmodjump.yaml",
        description="Name of the per-project YAML config file at the workspace root",
    )

    # Resource limits
    max_file_bytes: int = Field(
        default=1024 * 1024,
        gt=0,
        description="Largest stylesheet/YAML file the resolvers will read",
    )

    @field_validator("camel_case", mode="before")
    @classmethod
    def camelCase_parse(cls, value: Any) -> CamelCaseMode:
        """Accept the legacy option values true/false/"dashes" as well as mode names"""
        return CamelCaseMode.mode_parse(value)

    def aliasTarget_expand(self, target: str, workspace_root: str) -> str:
        """
        Substitute the workspace folder variable in an alias target.

        Args:
            target: Alias target as configured
            workspace_root: Absolute path of the workspace root

        Returns:
            Target with ${workspaceFolder} replaced

        Example:
            >>> settings = AppSettings()
            >>> settings.aliasTarget_expand('${workspaceFolder}/src', '/proj')
            '/proj/src'
        """
        return target.replace(WORKSPACE_FOLDER_VARIABLE, workspace_root)


# Singleton instance - import this in your code
appsettings = AppSettings()
