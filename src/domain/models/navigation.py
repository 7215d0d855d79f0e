"""Domain models for report drill-down state."""

from dataclasses import dataclass

from src.domain.models.reports import Report


@dataclass(frozen=True)
class SelectedReport:
    """Immutable snapshot of the active report and its drill path.

    Attributes:
        report: Active report, never mutated by navigation.
        series_traversal: Series names from the top level down to the
            displayed series. Empty when viewing the top level.
    """

    report: Report
    series_traversal: tuple[str, ...] = ()

    @property
    def depth(self) -> int:
        return len(self.series_traversal)

    @property
    def current_series_name(self) -> str:
        """Name of the displayed series."""
        if self.series_traversal:
            return self.series_traversal[-1]
        return self.report.top_level_account_name

    @property
    def child_series_names(self) -> tuple[str, ...]:
        """Series the user may drill into from the displayed level."""
        return self.report.children_of(self.series_traversal)


@dataclass(frozen=True)
class Breadcrumb:
    """One entry of the breadcrumb trail above the report chart."""

    level: int
    label: str
    is_current: bool = False


__all__ = ["SelectedReport", "Breadcrumb"]
