"""Read-only views over a snapshot sequence used by charts, tables and cards."""

from decimal import Decimal, ROUND_HALF_UP

from buyrent.models.results import YearlySnapshot

ONE_PLACE = Decimal("0.1")

# Fields a detail card compares against the previous year
CHANGE_FIELDS = (
    "home_value",
    "buying",
    "renting",
    "home_equity",
    "investments_buying",
    "investments_renting",
    "remaining_loan",
)


def break_even_year(snapshots: tuple[YearlySnapshot, ...] | list[YearlySnapshot]) -> int | None:
    """First year in which buying net worth exceeds renting, or None."""
    for s in snapshots:
        if s.buying > s.renting:
            return s.year
    return None


def snapshot_at(snapshots: tuple[YearlySnapshot, ...] | list[YearlySnapshot], year: int) -> YearlySnapshot:
    """Snapshot for ``year``, clamped to the last one available."""
    if not snapshots:
        raise ValueError("No snapshots to read")
    return snapshots[max(0, min(year, len(snapshots) - 1))]


def net_worth_at(
    snapshots: tuple[YearlySnapshot, ...] | list[YearlySnapshot], year: int
) -> tuple[Decimal, Decimal]:
    """(buying, renting) net worth at ``year``."""
    s = snapshot_at(snapshots, year)
    return s.buying, s.renting


def percent_change(current: Decimal, previous: Decimal) -> Decimal | None:
    """Percentage change, or None when there is no base to compare against."""
    if previous == 0:
        return None
    return ((current - previous) / previous * 100).quantize(ONE_PLACE, ROUND_HALF_UP)


def year_over_year_changes(
    current: YearlySnapshot, previous: YearlySnapshot | None
) -> dict[str, Decimal | None]:
    """Percent change of each tracked field since the previous year."""
    if previous is None:
        return {}
    return {
        name: percent_change(getattr(current, name), getattr(previous, name))
        for name in CHANGE_FIELDS
    }
