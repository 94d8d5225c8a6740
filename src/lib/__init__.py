"""
cssmodjump library - definition resolution for CSS modules and i18n YAML

Token extraction, import scanning, class/key position resolvers and the
resolution pipeline that composes them.
"""

from .resolver import DefinitionResolver
from .reader import CssModJumpError, TargetReadError, TargetFileTooLargeError, text_read
from .project import ProjectConfig, ProjectConfigError
from .snippet import snippet_render
from .log import LOG, state_connectToLogger

__all__ = [
    "DefinitionResolver",
    "CssModJumpError",
    "TargetReadError",
    "TargetFileTooLargeError",
    "text_read",
    "ProjectConfig",
    "ProjectConfigError",
    "snippet_render",
    "LOG",
    "state_connectToLogger",
]
