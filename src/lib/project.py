"""
Project root discovery and per-project configuration.

A project may carry a YAML config file at its root (cssmodjump.yaml by
default) using the option names of the editor extension:

    camelCase: dashes          # true | false | dashes
    pathAlias:
      "@styles": ${workspaceFolder}/src/styles
      "~common": ./shared

Values from the file override the environment settings for documents
inside that project.
"""

from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from ..config.settings import AppSettings
from ..models.resolution import CamelCaseMode
from .log import LOG
from .reader import CssModJumpError


# Files whose presence marks a workspace root
WORKSPACE_MARKERS = ("package.json", "tsconfig.json", "jsconfig.json", ".git")


class ProjectConfigError(CssModJumpError):
    """Raised when the project config file cannot be loaded or is invalid"""
    pass


def workspaceRoot_find(start: Union[str, Path], config_name: Optional[str] = None) -> Path:
    """
    Find the nearest ancestor directory that looks like a project root.

    Args:
        start: Directory to start from (usually the document's directory)
        config_name: Project config file name, also accepted as a marker

    Returns:
        The first directory holding a marker, or start itself if none does
    """
    start_path = Path(start).resolve()
    markers = WORKSPACE_MARKERS + ((config_name,) if config_name else ())

    for directory in (start_path, *start_path.parents):
        if any((directory / marker).exists() for marker in markers):
            return directory
    return start_path


class ProjectConfig:
    """
    Represents the optional configuration file of one project.
    """

    def __init__(self, root: Union[str, Path], config_name: str = "cssmodjump.yaml"):
        """
        Load a project's config file, if present.

        Args:
            root: Workspace root directory
            config_name: Config file name at the root

        Raises:
            ProjectConfigError: If the file exists but cannot be parsed
        """
        self.root = Path(root)
        self.config_path = self.root / config_name
        self.config = self._config_load()

    def _config_load(self) -> Dict[str, Any]:
        """Load and parse the config file; a missing file is an empty config"""
        if not self.config_path.exists():
            return {}
        try:
            with open(self.config_path, 'r', encoding='utf-8') as f:
                config: Any = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ProjectConfigError(f"Failed to parse {self.config_path.name}: {e}")
        except OSError as e:
            raise ProjectConfigError(f"Failed to load {self.config_path.name}: {e}")

        if config is None:
            return {}
        if not isinstance(config, dict):
            raise ProjectConfigError(f"{self.config_path.name} must contain a mapping")
        LOG(f"Loaded project config: {self.config_path}", level=2)
        return config

    def config_get(self, key: str, default: Any = None) -> Any:
        """Get a top-level configuration value"""
        return self.config.get(key, default)

    def settings_merge(self, settings: AppSettings) -> AppSettings:
        """
        Overlay this project's options on application settings.

        Args:
            settings: Settings from the environment

        Returns:
            A copy of settings with camelCase / pathAlias from the file applied

        Raises:
            ProjectConfigError: If an option has the wrong shape
        """
        updates: Dict[str, Any] = {}

        camel_case = self.config_get("camelCase")
        if camel_case is not None:
            try:
                updates["camel_case"] = CamelCaseMode.mode_parse(camel_case)
            except ValueError as e:
                raise ProjectConfigError(str(e))

        aliases = self.config_get("pathAlias")
        if aliases is not None:
            if not isinstance(aliases, dict) or not all(
                isinstance(k, str) and isinstance(v, str) for k, v in aliases.items()
            ):
                raise ProjectConfigError("pathAlias must map alias strings to path strings")
            updates["path_alias"] = {**settings.path_alias, **aliases}

        if not updates:
            return settings
        return settings.model_copy(update=updates)

    def __repr__(self) -> str:
        return f"ProjectConfig(root='{self.root}')"
