"""
Definition resolution for CSS-module and i18n YAML references

Answers an editor "go to definition" request issued on a line of script
code:

    import css from "./app.module.css"      -> top of app.module.css
    <div className={css.submitBtn} />       -> .submit-btn in app.module.css
    t(messages.greeting)                    -> greeting: in messages.i18n.yaml

The request runs through a linear pipeline of stages over a ResolveState:

1. clickInfo_detect: import-line click or `obj.field` click
2. projectSettings_load: workspace root and per-project options
3. importPath_resolve: alias table + specifier -> absolute path
4. sourcePath_rewrite: generated *.i18n.yaml.d.ts -> its YAML source
5. targetPosition_find: class selector or YAML key lookup

"No definition" outcomes end the pipeline with a ResolutionStatus and
never raise. Read failures of a resolved target raise TargetReadError.
"""

import asyncio
from pathlib import Path
from typing import Optional

from ..config.settings import AppSettings, appsettings
from ..models.location import ORIGIN, ClickInfo, Location, Position, TextDocument
from ..models.resolution import CancellationToken, ResolutionStatus
from ..models.state import ResolveState, pipeline_run
from .imports import importLine_match, importModule_find, specifierClick_check
from .log import LOG, state_connectToLogger
from .paths import aliasTable_get, declarationSource_find, importPath_resolve
from .project import ProjectConfig, workspaceRoot_find
from .stylesheet import classPosition_findInFile
from .tokens import keyword_parse, word_extract
from .yamlkeys import keyPosition_findInFile


YAML_SUFFIXES = (".yml", ".yaml")


class DefinitionResolver:
    """
    Resolves definition requests to a file and position

    One instance can serve any number of requests; nothing is kept between
    them apart from the base settings.
    """

    def __init__(self, settings: Optional[AppSettings] = None, verbosity: int = 0) -> None:
        """
        Initialize resolver

        Args:
            settings: Base settings (defaults to the environment settings);
                      each project's config file is merged over them per request
            verbosity: Logging verbosity for requests (0 = silent)
        """
        self.settings = settings if settings is not None else appsettings
        self.verbosity = verbosity

    async def resolve(
        self,
        document: TextDocument,
        position: Position,
        token: Optional[CancellationToken] = None,
    ) -> Optional[Location]:
        """
        Resolve the definition under the cursor

        Args:
            document: Document the request was issued in
            position: Cursor position
            token: Optional host cancellation token

        Returns:
            Location of the definition, or None when there is none

        Raises:
            TargetReadError: If the resolved target file cannot be read
            ProjectConfigError: If the project config file is invalid
        """
        state = await self.resolution_run(document, position, token)
        return state.location

    async def resolution_run(
        self,
        document: TextDocument,
        position: Position,
        token: Optional[CancellationToken] = None,
    ) -> ResolveState:
        """
        Run the resolution pipeline and return its final state

        Same as resolve(), but the caller also gets the ResolutionStatus
        and the intermediate results (click info, resolved paths).
        """
        state = ResolveState.state_createFromRequest(
            document, position, token=token, verbosity=self.verbosity
        )
        state_connectToLogger(state)
        LOG(f"Definition request at {document.path}:{position.line}:{position.character}", level=2)

        final_state = await pipeline_run(
            state,
            self.clickInfo_detect,
            self.projectSettings_load,
            self.importPath_resolve,
            self.sourcePath_rewrite,
            self.targetPosition_find,
        )
        LOG(f"Request finished: {final_state.status.value}", level=2)
        return final_state

    async def clickInfo_detect(self, inputstate: ResolveState) -> ResolveState:
        """
        Work out what the click refers to.

        A click inside the module path (or bound name) of an import line
        targets the top of the imported file and wins over any property
        access on the same line. Otherwise the `obj.field` under the cursor
        is looked up: obj gives the import, field the class or key.

        Returns:
            ResolveState with clickInfo set, or finished with NO_TOKEN,
            MALFORMED_TOKEN or UNRESOLVED_IMPORT
        """
        state = inputstate.copy()
        line = state.currentLine
        offset = state.position.character

        match = importLine_match(line)
        if specifierClick_check(line, match, offset):
            state.clickInfo = ClickInfo(importModule=match.specifier)
            LOG(f"Import line click on '{match.specifier}'", level=3)
            return state

        word = word_extract(line, offset)
        if not word:
            state.finish(ResolutionStatus.NO_TOKEN)
            return state

        keyword = keyword_parse(word)
        if keyword is None:
            LOG(f"Token '{word}' has no obj.field pair", level=3)
            state.finish(ResolutionStatus.MALFORMED_TOKEN)
            return state

        state.clickInfo = ClickInfo(
            importModule=importModule_find(state.document.text, keyword.obj),
            targetClass=keyword.field,
        )
        if not state.clickInfo.importModule:
            LOG(f"No stylesheet/YAML import binds '{keyword.obj}'", level=3)
            state.finish(ResolutionStatus.UNRESOLVED_IMPORT)
            return state

        LOG(f"Property click {keyword.obj}.{keyword.field} -> '{state.clickInfo.importModule}'", level=3)
        return state

    def _settings_forRoot(self, root: Path) -> AppSettings:
        return ProjectConfig(root, self.settings.project_config_name).settings_merge(self.settings)

    async def projectSettings_load(self, inputstate: ResolveState) -> ResolveState:
        """Find the workspace root and merge its config file over the base settings"""
        state = inputstate.copy()
        state.workspaceRoot = await asyncio.to_thread(
            workspaceRoot_find, state.document.directory, self.settings.project_config_name
        )
        state.settings = await asyncio.to_thread(self._settings_forRoot, state.workspaceRoot)
        LOG(f"Workspace root: {state.workspaceRoot}", level=3)
        return state

    async def importPath_resolve(self, inputstate: ResolveState) -> ResolveState:
        """
        Resolve the click's import specifier to an absolute path.

        Returns:
            ResolveState with importPath set, or finished with
            UNRESOLVED_IMPORT / CANCELLED
        """
        state = inputstate.copy()

        aliases = await aliasTable_get(state.settings, state.workspaceRoot)
        if state.cancelled:
            state.finish(ResolutionStatus.CANCELLED)
            return state

        state.importPath = await importPath_resolve(
            state.clickInfo.importModule, state.document.directory, aliases
        )
        if not state.importPath:
            state.finish(ResolutionStatus.UNRESOLVED_IMPORT)
        return state

    async def sourcePath_rewrite(self, inputstate: ResolveState) -> ResolveState:
        """Jump to the YAML source instead of its generated .d.ts, when it exists"""
        state = inputstate.copy()
        state.sourcePath = await asyncio.to_thread(declarationSource_find, state.importPath)
        if state.sourcePath != state.importPath:
            LOG(f"Redirected {Path(state.importPath).name} -> {Path(state.sourcePath).name}", level=3)
        return state

    async def targetPosition_find(self, inputstate: ResolveState) -> ResolveState:
        """
        Locate the target inside the source file.

        No target class means the top of the file. YAML files are searched
        for a `key:` declaration (falling back to the top of the file);
        everything else for a class selector.

        Returns:
            ResolveState finished with RESOLVED, TARGET_NOT_FOUND or CANCELLED

        Raises:
            TargetReadError: If the file cannot be read or is too large
        """
        state = inputstate.copy()
        settings: AppSettings = state.settings
        target = state.clickInfo.targetClass

        if not target:
            state.targetPosition = ORIGIN
            state.finish(ResolutionStatus.RESOLVED)
            return state

        if state.cancelled:
            state.finish(ResolutionStatus.CANCELLED)
            return state

        if state.sourcePath.lower().endswith(YAML_SUFFIXES):
            state.targetPosition = await asyncio.to_thread(
                keyPosition_findInFile, state.sourcePath, target, settings.max_file_bytes
            )
        else:
            state.targetPosition = await asyncio.to_thread(
                classPosition_findInFile,
                state.sourcePath,
                target,
                settings.camel_case,
                settings.max_file_bytes,
            )

        if state.targetPosition is None:
            LOG(f"'{target}' not found in {state.sourcePath}", level=3)
            state.finish(ResolutionStatus.TARGET_NOT_FOUND)
        else:
            state.finish(ResolutionStatus.RESOLVED)
        return state
