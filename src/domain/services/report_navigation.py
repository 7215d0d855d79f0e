"""Drill-down navigation over a report's series hierarchy.

Every transition is a pure function from one ``SelectedReport`` snapshot to
the next. A rejected transition raises ``NavigationError`` and leaves the
previous snapshot as the current state. ``ReportNavigator`` wraps these
functions for a host that wants to hold the current snapshot.
"""

from collections.abc import Sequence
from logging import Logger

from src.domain.exceptions import NavigationError
from src.domain.models.navigation import Breadcrumb, SelectedReport
from src.domain.models.reports import Report


def select_report(
    report: Report,
    traversal: Sequence[str] = (),
) -> SelectedReport:
    """Start viewing ``report`` at the level described by ``traversal``.

    Args:
        report: Report to activate.
        traversal: Descent path from the top level. Empty for the top level.

    Returns:
        SelectedReport: Fresh snapshot for the report.

    Raises:
        NavigationError: If ``traversal`` is not a valid descent path.
    """
    traversal = tuple(traversal)
    if not report.is_valid_traversal(traversal):
        raise NavigationError(
            traversal,
            f"not a descent path of report {report.report_id}",
        )
    return SelectedReport(report=report, series_traversal=traversal)


def drill_into(state: SelectedReport, series_name: str) -> SelectedReport:
    """Descend from the displayed series into ``series_name``.

    Selecting the displayed series itself returns ``state`` unchanged.

    Raises:
        NavigationError: If ``series_name`` is not a child of the
            displayed series.
    """
    if series_name == state.current_series_name:
        return state
    if series_name not in state.child_series_names:
        raise NavigationError(
            state.series_traversal,
            f"{series_name!r} is not a child of "
            f"{state.current_series_name!r}",
        )
    return SelectedReport(
        report=state.report,
        series_traversal=state.series_traversal + (series_name,),
    )


def breadcrumb_to(state: SelectedReport, index: int) -> SelectedReport:
    """Jump back to ancestor level ``index`` of the current traversal.

    Raises:
        NavigationError: If ``index`` is outside ``0..depth``.
    """
    _check_level(state, index)
    if index == state.depth:
        return state
    return SelectedReport(
        report=state.report,
        series_traversal=state.series_traversal[:index],
    )


def title_for(state: SelectedReport, level: int) -> str:
    """Return the breadcrumb label for ``level``."""
    _check_level(state, level)
    if level == 0:
        return state.report.title
    return state.series_traversal[level - 1]


def breadcrumbs(state: SelectedReport) -> tuple[Breadcrumb, ...]:
    """Return the breadcrumb trail, from the report title to the current level."""
    return tuple(
        Breadcrumb(
            level=level,
            label=title_for(state, level),
            is_current=level == state.depth,
        )
        for level in range(state.depth + 1)
    )


def _check_level(state: SelectedReport, level: int) -> None:
    if isinstance(level, bool) or not isinstance(level, int):
        raise NavigationError(
            state.series_traversal,
            f"breadcrumb level must be an integer, got {level!r}",
        )
    if not 0 <= level <= state.depth:
        raise NavigationError(
            state.series_traversal,
            f"breadcrumb level {level} out of range 0..{state.depth}",
        )


class ReportNavigator:
    """Holder of the current drill-down snapshot for one viewer.

    The navigator starts with no report selected. Each operation replaces
    ``current`` with a new snapshot and returns it; snapshots handed out
    earlier are never modified.
    """

    def __init__(self, logger: Logger | None = None) -> None:
        self._current: SelectedReport | None = None
        self._logger = logger

    @property
    def current(self) -> SelectedReport | None:
        return self._current

    def select_report(
        self,
        report: Report,
        traversal: Sequence[str] = (),
    ) -> SelectedReport:
        """Activate ``report`` at ``traversal``, discarding previous state."""
        self._current = select_report(report, traversal)
        self._log(f"Selected report {report.report_id}")
        return self._current

    def drill_into(self, series_name: str) -> SelectedReport:
        previous = self._require_state()
        self._current = drill_into(previous, series_name)
        if self._current is not previous:
            self._log(f"Drilled into {series_name!r}")
        return self._current

    def breadcrumb_to(self, index: int) -> SelectedReport:
        previous = self._require_state()
        self._current = breadcrumb_to(previous, index)
        if self._current is not previous:
            self._log(f"Jumped to breadcrumb level {index}")
        return self._current

    def title_for(self, level: int) -> str:
        return title_for(self._require_state(), level)

    def breadcrumbs(self) -> tuple[Breadcrumb, ...]:
        return breadcrumbs(self._require_state())

    def clear(self) -> None:
        """Return to the initial state with no report selected."""
        self._current = None

    def _require_state(self) -> SelectedReport:
        if self._current is None:
            raise NavigationError((), "no report selected")
        return self._current

    def _log(self, message: str) -> None:
        if self._logger is not None:
            self._logger.info(message)


__all__ = [
    "select_report",
    "drill_into",
    "breadcrumb_to",
    "title_for",
    "breadcrumbs",
    "ReportNavigator",
]
