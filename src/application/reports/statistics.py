"""Reproductive performance statistics for reports.

Pure functions only: callers load litters and offspring from one snapshot of the
store and hand them in, so the same inputs always produce the same results.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence

from src.domain.models.litter import Litter
from src.domain.models.offspring import Offspring
from src.domain.models.report import NOT_AVAILABLE, PerformanceMetrics, ReportResults


def format_rate(numerator: int, denominator: int) -> str:
    """Percentage with exactly two decimals, e.g. ``"66.67%"``; ``"N/A"`` for a zero base."""
    if denominator == 0:
        return NOT_AVAILABLE
    return f"{numerator / denominator * 100:.2f}%"


def average(total: int, count: int) -> float | None:
    if count == 0:
        return None
    return round(total / count, 2)


def compute_metrics(
    litters: Iterable[Litter], offspring: Iterable[Offspring]
) -> PerformanceMetrics:
    """Metrics over the given litters and the offspring belonging to them.

    Offspring whose litter is not among ``litters`` are ignored.
    """
    litter_list = list({litter.id: litter for litter in litters}.values())
    litter_ids = {litter.id for litter in litter_list}
    born = [o for o in offspring if o.litter_id in litter_ids]

    litters_recorded = len(litter_list)
    total_born = len(born)
    total_weaned = sum(1 for o in born if o.is_weaned)
    total_deceased = sum(1 for o in born if not o.is_alive)

    return PerformanceMetrics(
        litters_recorded=litters_recorded,
        total_reported_litter_size=sum(litter.reported_litter_size for litter in litter_list),
        total_offspring_born=total_born,
        total_offspring_weaned=total_weaned,
        total_deceased_offspring=total_deceased,
        average_actual_offspring_per_litter=average(total_born, litters_recorded),
        weaning_survivability_rate=format_rate(total_weaned, total_born),
    )


def build_results(
    litters_by_target: Mapping[str, Sequence[Litter]],
    offspring: Sequence[Offspring],
) -> ReportResults:
    """Per-target metrics plus group metrics recomputed from the union of all litters.

    Group rates come from aggregate totals, never from averaging per-target rates.
    ``litters_by_target`` keeps its insertion order in the result.
    """
    per_target = {
        target: compute_metrics(litters, offspring)
        for target, litters in litters_by_target.items()
    }
    all_litters = [litter for litters in litters_by_target.values() for litter in litters]
    return ReportResults(group=compute_metrics(all_litters, offspring), per_target=per_target)
