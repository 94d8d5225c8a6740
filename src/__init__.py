"""
cssmodjump - go to definition for CSS modules and i18n YAML files

Resolves `css.submitBtn`-style references and stylesheet/YAML import paths
in script code to the selector or key they point at.
"""

__version__ = "1.0.0"

from .lib import DefinitionResolver, CssModJumpError, LOG, state_connectToLogger
from .models import CamelCaseMode, Location, Position, TextDocument

__all__ = [
    "DefinitionResolver",
    "CssModJumpError",
    "CamelCaseMode",
    "Location",
    "Position",
    "TextDocument",
    "LOG",
    "state_connectToLogger",
    "__version__",
]
