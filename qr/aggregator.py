"""
Scan reconciliation.

- ingest(): merge a batch into the session list, replacing by source file so
  re-scanning the same photo never double counts
- group_totals(): per (model_name, lot) totals in first-seen order
- ScanSession: the caller-held list of observations and last batch errors
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Sequence, Tuple

from domain.records import GroupedTotal, ScanBatchResult, ScanObservation
from utils.logger import get_logger

logger = get_logger("aggregator")


def ingest(
    existing: Sequence[ScanObservation],
    incoming: Iterable[ScanObservation],
) -> List[ScanObservation]:
    """Return a new list: incoming observations replace same-file entries in place, others append."""
    merged = list(existing)
    position: Dict[str, int] = {obs.source_file: idx for idx, obs in enumerate(merged)}

    for obs in incoming:
        idx = position.get(obs.source_file)
        if idx is not None:
            merged[idx] = obs
        else:
            position[obs.source_file] = len(merged)
            merged.append(obs)

    return merged


def group_totals(observations: Iterable[ScanObservation]) -> List[GroupedTotal]:
    groups: Dict[Tuple[str, str], GroupedTotal] = {}

    for obs in observations:
        key = (obs.record.model_name, obs.record.lot)
        group = groups.get(key)
        if group is None:
            groups[key] = GroupedTotal(
                model_name=obs.record.model_name,
                lot=obs.record.lot,
                total_quantity=obs.record.quantity,
                files=[obs.source_file],
            )
            continue

        group.total_quantity += obs.record.quantity
        if obs.source_file not in group.files:
            group.files.append(obs.source_file)

    return list(groups.values())


@dataclass
class ScanSession:
    observations: List[ScanObservation] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)

    def apply(self, batch: ScanBatchResult) -> None:
        """Merge a finished batch; errors show the latest batch only."""
        before = len(self.observations)
        self.observations = ingest(self.observations, batch.observations)
        self.errors = list(batch.errors)
        logger.info(
            "scan session updated",
            added=len(self.observations) - before,
            replaced=len(batch.observations) - (len(self.observations) - before),
            total=len(self.observations),
        )

    def clear(self) -> None:
        self.observations = []
        self.errors = []

    def totals(self) -> List[GroupedTotal]:
        return group_totals(self.observations)
