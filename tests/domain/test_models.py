"""Tests for domain model lookups."""

import pytest

from src.domain.models.accounts import AccountRecord
from src.domain.models.navigation import SelectedReport
from src.domain.models.reports import Report, Series
from src.domain.services.account_tree import build_account_tree


def _report() -> Report:
    return Report(
        report_id=1,
        title="Monthly Expenses",
        top_level_account_name="Expenses",
        series=(
            Series(
                name="Food",
                values=(10.0, 12.5),
                children=(Series(name="Groceries"), Series(name="Dining")),
            ),
            Series(name="Rent", values=(900.0, 900.0)),
        ),
        labels=("Jan", "Feb"),
    )


def test_is_root_account_depends_on_parent() -> None:
    """Only records without a parent are roots."""
    assert AccountRecord(1, None, "Assets").is_root_account() is True
    assert AccountRecord(2, 1, "Bank").is_root_account() is False


def test_walk_yields_depth_first_with_depth() -> None:
    """walk should produce render order with indentation depth."""
    tree = build_account_tree(
        [
            AccountRecord(1, None, "Assets"),
            AccountRecord(2, 1, "Bank"),
            AccountRecord(3, 2, "Checking"),
            AccountRecord(4, 1, "Cash"),
            AccountRecord(5, None, "Income"),
        ]
    )

    assert [(depth, node.name) for depth, node in tree.walk()] == [
        (0, "Assets"),
        (1, "Bank"),
        (2, "Checking"),
        (1, "Cash"),
        (0, "Income"),
    ]


def test_ancestors_are_returned_root_first() -> None:
    """ancestors should follow parent ids up to the root."""
    tree = build_account_tree(
        [
            AccountRecord(1, None, "Assets"),
            AccountRecord(2, 1, "Bank"),
            AccountRecord(3, 2, "Checking"),
        ]
    )

    assert [a.name for a in tree.ancestors(3)] == ["Assets", "Bank"]
    assert tree.ancestors(1) == ()
    assert 3 in tree
    with pytest.raises(KeyError):
        tree.ancestors(99)


def test_index_is_read_only() -> None:
    """The index should not accept assignments."""
    tree = build_account_tree([AccountRecord(1, None, "Assets")])

    with pytest.raises(TypeError):
        tree.index[2] = tree.get(1)  # type: ignore[index]


def test_report_children_of_each_level() -> None:
    """children_of should resolve names level by level."""
    report = _report()

    assert report.children_of(()) == ("Food", "Rent")
    assert report.children_of(("Food",)) == ("Groceries", "Dining")
    assert report.children_of(("Food", "Dining")) == ()
    with pytest.raises(KeyError):
        report.children_of(("Dining",))


def test_report_validates_traversals() -> None:
    """Only descent paths from the top level are valid."""
    report = _report()

    assert report.is_valid_traversal(()) is True
    assert report.is_valid_traversal(("Food", "Groceries")) is True
    assert report.is_valid_traversal(("Groceries",)) is False
    assert report.is_valid_traversal(("Rent", "Food")) is False


def test_selected_report_derived_properties() -> None:
    """The displayed series falls back to the top-level name."""
    report = _report()

    top = SelectedReport(report=report)
    food = SelectedReport(report=report, series_traversal=("Food",))

    assert top.current_series_name == "Expenses"
    assert top.child_series_names == ("Food", "Rent")
    assert food.current_series_name == "Food"
    assert food.depth == 1
    assert report.series_at(("Food",)).values == (10.0, 12.5)
