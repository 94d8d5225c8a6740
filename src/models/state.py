"""
Resolution state model and pipeline helper

Defines ResolveState dataclass for the staged resolution pattern and the
pipeline_run() helper for composing resolution stages.
"""

from pathlib import Path
from typing import Awaitable, Callable, Optional, TypeVar, TYPE_CHECKING
from dataclasses import dataclass, field

from .location import ClickInfo, Location, Position, TextDocument
from .resolution import CancellationToken, ResolutionStatus

# Forward reference for type hint - avoid circular import
if TYPE_CHECKING:
    from ..config.settings import AppSettings


RS = TypeVar("RS", bound="ResolveState")


@dataclass
class ResolveState:
    """
    Central state container for one definition request (state bus pattern).

    Each stage of the resolution pipeline receives the state produced by the
    previous one and fills in its own fields. A stage ends the request by
    setting a terminal status; the remaining stages are then skipped.

    Pipeline stages and their state additions:
        - Initial: document, position, verbosity, token, currentLine
        - clickInfo_detect: clickInfo
        - projectSettings_load: workspaceRoot, settings
        - importPath_resolve: importPath
        - sourcePath_rewrite: sourcePath
        - targetPosition_find: targetPosition, status=RESOLVED

    Attributes:
        document: Document the request was issued in
        position: Cursor position inside the document
        verbosity: Logging verbosity level (0 = silent)
        token: Optional host cancellation token
        currentLine: Text of the line under the cursor
        clickInfo: Import specifier and target class/key of the click
        workspaceRoot: Project root used for aliases and project config
        settings: AppSettings merged with the project config file
        importPath: Absolute path the import specifier resolved to
        sourcePath: File actually opened (importPath after rewrites)
        targetPosition: Position inside sourcePath
        status: Outcome of the request so far
    """

    # Request
    document: Optional[TextDocument] = field(default=None)
    position: Optional[Position] = field(default=None)
    verbosity: int = field(default=0)
    token: Optional[CancellationToken] = field(default=None)
    currentLine: str = field(default="")

    # Pipeline state
    clickInfo: Optional[ClickInfo] = field(default=None)
    workspaceRoot: Optional[Path] = field(default=None)
    settings: Optional["AppSettings"] = field(default=None)
    importPath: str = field(default="")
    sourcePath: str = field(default="")
    targetPosition: Optional[Position] = field(default=None)
    status: ResolutionStatus = field(default=ResolutionStatus.PENDING)

    @classmethod
    def state_createFromRequest(
        cls,
        document: TextDocument,
        position: Position,
        token: Optional[CancellationToken] = None,
        verbosity: int = 0,
    ) -> "ResolveState":
        """
        Create the initial ResolveState for a definition request.

        Args:
            document: Document the request was issued in
            position: Cursor position
            token: Optional host cancellation token
            verbosity: Logging verbosity level

        Returns:
            ResolveState with the request fields and the current line set
        """
        return cls(
            document=document,
            position=position,
            token=token,
            verbosity=verbosity,
            currentLine=document.line_get(position.line),
        )

    def copy(self: RS) -> RS:
        """
        Creates a shallow copy of the ResolveState instance.

        Returns:
            A new ResolveState instance.
        """
        return type(self)(**self.__dict__)

    def finish(self, status: ResolutionStatus) -> None:
        self.status = status

    @property
    def finished(self) -> bool:
        return self.status is not ResolutionStatus.PENDING

    @property
    def cancelled(self) -> bool:
        return self.token is not None and self.token.is_cancelled

    @property
    def location(self) -> Optional[Location]:
        """The click target, or None unless the request resolved"""
        if self.status is not ResolutionStatus.RESOLVED or self.targetPosition is None:
            return None
        return Location(path=self.sourcePath, position=self.targetPosition)


Stage = Callable[[ResolveState], Awaitable[ResolveState]]


async def pipeline_run(initial_state: ResolveState, *stages: Stage) -> ResolveState:
    """
    Execute the resolution stages in order.

    Each stage is a coroutine (ResolveState) -> ResolveState that receives
    the output of the previous stage. Execution stops as soon as a stage
    leaves the state finished, and the host cancellation token is checked
    before every stage.

    Args:
        initial_state: Starting ResolveState
        *stages: Stage coroutines to execute in order

    Returns:
        Final ResolveState

    Example:
        final_state = await pipeline_run(
            initial_state,
            clickInfo_detect,
            importPath_resolve,
            sourcePath_rewrite,
            targetPosition_find,
        )
    """
    state = initial_state
    for stage in stages:
        if state.finished:
            break
        if state.cancelled:
            state = state.copy()
            state.finish(ResolutionStatus.CANCELLED)
            break
        state = await stage(state)
    return state
