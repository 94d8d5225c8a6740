"""
Import specifier and alias resolution

Turns an import specifier into an absolute file path:

1. Alias prefixes (longest first): '@styles/app.css' -> '<target>/app.css'
2. Relative specifiers against the importing document's directory
3. Absolute paths as-is
4. '~package/x.scss' (webpack/sass convention) and bare specifiers through
   node_modules directories, walking up from the document

A candidate resolves when it is a file, or when a generated declaration
file sits next to where it would be ('labels.i18n.yaml.d.ts').

Alias tables merge compilerOptions.paths from tsconfig.json/jsconfig.json
with user-configured aliases (user aliases win).
"""

import asyncio
import json
import re
from pathlib import Path
from typing import Dict, Iterator, Optional, Union

from ..config.settings import AppSettings
from .imports import DECLARATION_SUFFIX
from .log import LOG


TSCONFIG_NAMES = ("tsconfig.json", "jsconfig.json")

# Generated typings of i18n YAML files: messages.i18n.yaml.d.ts
I18N_DECLARATION = re.compile(r"\.i18n\.ya?ml\.d\.ts$")

_JSON_COMMENTS = re.compile(r'("(?:\\.|[^"\\])*")|//[^\n]*|/\*.*?\*/', re.S)
_JSON_TRAILING_COMMA = re.compile(r",(\s*[}\]])")


def _alias_matches(specifier: str, alias: str) -> Optional[str]:
    """Return the part of specifier after alias, or None if alias is not its prefix"""
    prefix = alias.rstrip("/")
    if not prefix:
        return None
    if specifier == prefix:
        return ""
    if specifier.startswith(prefix + "/"):
        return specifier[len(prefix) + 1:]
    return None


def _candidates_iter(
    specifier: str, current_dir: Path, aliases: Dict[str, str]
) -> Iterator[Path]:
    for alias in sorted(aliases, key=len, reverse=True):
        rest = _alias_matches(specifier, alias)
        if rest is not None:
            target = Path(aliases[alias])
            yield target / rest if rest else target

    if specifier.startswith(("./", "../")) or specifier in (".", ".."):
        yield current_dir / specifier
        return

    if Path(specifier).is_absolute():
        yield Path(specifier)
        return

    package_path = specifier[1:].lstrip("/") if specifier.startswith("~") else specifier
    if not package_path:
        return
    for directory in (current_dir, *current_dir.parents):
        yield directory / "node_modules" / package_path


def file_probe(candidate: Path) -> Optional[Path]:
    """Return the file a candidate path denotes, trying its declaration file second"""
    if candidate.is_file():
        return candidate.resolve()
    if not candidate.name:
        return None
    declaration = candidate.with_name(candidate.name + DECLARATION_SUFFIX)
    if declaration.is_file():
        return declaration.resolve()
    return None


def importPath_resolveSync(
    specifier: str, current_dir: Union[str, Path], aliases: Dict[str, str]
) -> str:
    """
    Resolve an import specifier to an absolute path, blocking.

    Args:
        specifier: Module specifier from the import statement
        current_dir: Directory of the importing document
        aliases: Alias prefix -> absolute directory

    Returns:
        Absolute path of the file, or '' if nothing on disk matches
    """
    if not specifier:
        return ""

    for candidate in _candidates_iter(specifier, Path(current_dir), aliases):
        found = file_probe(candidate)
        if found is not None:
            LOG(f"Resolved '{specifier}' -> {found}", level=3)
            return str(found)

    LOG(f"Could not resolve '{specifier}' from {current_dir}", level=3)
    return ""


async def importPath_resolve(
    specifier: str, current_dir: Union[str, Path], aliases: Dict[str, str]
) -> str:
    """Resolve an import specifier without blocking the event loop"""
    return await asyncio.to_thread(importPath_resolveSync, specifier, current_dir, aliases)


def jsonc_loads(text: str) -> dict:
    """
    Parse JSON with comments and trailing commas, as tsconfig.json allows

    Raises:
        json.JSONDecodeError: If the text is still not valid JSON
    """
    stripped = _JSON_COMMENTS.sub(lambda match: match.group(1) or "", text)
    return json.loads(_JSON_TRAILING_COMMA.sub(r"\1", stripped))


def tsconfigPaths_read(root: Union[str, Path]) -> Dict[str, str]:
    """
    Read path aliases from compilerOptions.paths of the project's tsconfig

    '@/*': ['src/*'] becomes '@' -> '<root>/<baseUrl>/src'. Only the first
    target of each entry is used. An unparsable file is logged and ignored.

    Args:
        root: Workspace root holding tsconfig.json or jsconfig.json

    Returns:
        Alias prefix -> absolute directory (or file)
    """
    root_path = Path(root)
    for name in TSCONFIG_NAMES:
        config_path = root_path / name
        if not config_path.is_file():
            continue
        try:
            config = jsonc_loads(config_path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            LOG(f"Warning: ignoring {config_path}: {e}", level=2)
            return {}

        options = config.get("compilerOptions") if isinstance(config, dict) else None
        if not isinstance(options, dict):
            return {}
        base_dir = root_path / str(options.get("baseUrl", "."))
        paths = options.get("paths")
        if not isinstance(paths, dict):
            return {}

        aliases: Dict[str, str] = {}
        for pattern, targets in paths.items():
            if not isinstance(targets, list) or not targets or not isinstance(targets[0], str):
                continue
            alias = pattern[:-1] if pattern.endswith("*") else pattern
            target = targets[0][:-1] if targets[0].endswith("*") else targets[0]
            aliases[alias.rstrip("/") or alias] = str((base_dir / target).resolve())
        LOG(f"Read {len(aliases)} path aliases from {config_path.name}", level=2)
        return aliases
    return {}


def aliasTable_build(settings: AppSettings, workspace_root: Union[str, Path]) -> Dict[str, str]:
    """
    Build the alias table for documents of one workspace, blocking.

    Args:
        settings: Settings with user aliases (already merged with the project file)
        workspace_root: Root used for ${workspaceFolder} and relative targets

    Returns:
        Alias prefix -> absolute path
    """
    root = Path(workspace_root)
    aliases: Dict[str, str] = {}
    if settings.use_tsconfig_paths:
        aliases.update(tsconfigPaths_read(root))

    for alias, target in settings.path_alias.items():
        expanded = Path(settings.aliasTarget_expand(target, str(root)))
        if not expanded.is_absolute():
            expanded = root / expanded
        aliases[alias] = str(expanded.resolve())
    return aliases


async def aliasTable_get(settings: AppSettings, workspace_root: Union[str, Path]) -> Dict[str, str]:
    """Build the alias table without blocking the event loop"""
    return await asyncio.to_thread(aliasTable_build, settings, workspace_root)


def declarationSource_find(import_path: str) -> str:
    """
    Redirect a generated i18n declaration file to its YAML source.

    Args:
        import_path: Resolved import path

    Returns:
        The YAML source path when import_path is '*.i18n.yml.d.ts' /
        '*.i18n.yaml.d.ts' and the source exists, otherwise import_path

    Example:
        'msg.i18n.yaml.d.ts' -> 'msg.i18n.yaml' (if msg.i18n.yaml exists)
    """
    if not I18N_DECLARATION.search(import_path):
        return import_path
    source_path = import_path[: -len(DECLARATION_SUFFIX)]
    if Path(source_path).is_file():
        return source_path
    return import_path
