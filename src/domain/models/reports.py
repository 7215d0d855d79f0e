"""Domain models for hierarchical reports."""

from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Series:
    """Named node of a report, with its values and child series.

    Attributes:
        name: Series name, unique among its siblings.
        values: One value per report label.
        children: Child series in backend order.
    """

    name: str
    values: tuple[float, ...] = ()
    children: tuple["Series", ...] = ()

    def child(self, name: str) -> "Series | None":
        """Return the direct child called ``name``, if any."""
        return _find(self.children, name)

    @property
    def child_names(self) -> tuple[str, ...]:
        return tuple(child.name for child in self.children)


@dataclass(frozen=True)
class Report:
    """Tabulated report whose series form a tree below a top level.

    Attributes:
        report_id: Backend identifier of the report.
        title: Display title, used as the first breadcrumb.
        top_level_account_name: Name of the series shown at the top level.
        series: Children of the top level.
        subtitle: Optional subtitle.
        units: Unit label for values.
        labels: Column labels shared by every series.
    """

    report_id: int | str
    title: str
    top_level_account_name: str
    series: tuple[Series, ...] = ()
    subtitle: str = ""
    units: str = ""
    labels: tuple[str, ...] = ()

    def series_at(self, traversal: Sequence[str]) -> Series | None:
        """Return the series reached by ``traversal``.

        An empty traversal denotes the top level and returns None.

        Raises:
            KeyError: If a name along the path is not a child of its level.
        """
        current: Series | None = None
        for name in traversal:
            siblings = self.series if current is None else current.children
            current = _find(siblings, name)
            if current is None:
                raise KeyError(name)
        return current

    def children_of(self, traversal: Sequence[str]) -> tuple[str, ...]:
        """Return the child series names below the level ``traversal`` names.

        Raises:
            KeyError: If ``traversal`` is not a valid descent path.
        """
        node = self.series_at(traversal)
        if node is None:
            return tuple(series.name for series in self.series)
        return node.child_names

    def is_valid_traversal(self, traversal: Sequence[str]) -> bool:
        try:
            self.series_at(traversal)
        except KeyError:
            return False
        return True


def _find(candidates: Sequence[Series], name: str) -> Series | None:
    for candidate in candidates:
        if candidate.name == name:
            return candidate
    return None


__all__ = ["Series", "Report"]
