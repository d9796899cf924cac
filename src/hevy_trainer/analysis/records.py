"""All-time best weight per rep count."""

from datetime import datetime
from typing import Dict, Iterable, List, Optional, Union

from ..metrics.one_rep_max import OneRepMaxFormula, estimate_one_rep_max
from ..models.analytics import LiftRecord, RepRecord
from ..models.hevy import SetEntry


class RepRecordTable:
    """
    Heaviest weight lifted at each exact rep count, with the date achieved.

    Weights only ever go up for a given rep count. An equal weight never
    replaces the stored record unless it was achieved earlier, so the first
    date a weight was hit is kept whatever order sets are folded in.
    """

    def __init__(self) -> None:
        self._records: Dict[int, RepRecord] = {}

    def __len__(self) -> int:
        return len(self._records)

    def __bool__(self) -> bool:
        return bool(self._records)

    def add(self, reps: Optional[int], weight_kg: Optional[float], date: datetime) -> bool:
        """
        Fold one set in. Returns True if it set or improved a record.

        Sets without a positive weight and rep count are ignored.
        """
        if not reps or not weight_kg or reps <= 0 or weight_kg <= 0:
            return False

        current = self._records.get(reps)
        if current is not None:
            if weight_kg < current.weight_kg:
                return False
            if weight_kg == current.weight_kg and date >= current.date:
                return False

        self._records[reps] = RepRecord(reps=reps, weight_kg=weight_kg, date=date)
        return True

    def add_sets(self, sets: Iterable[SetEntry], date: datetime) -> None:
        """Fold in every working (non-warm-up) set from one workout."""
        for set_entry in sets:
            if set_entry.is_warmup:
                continue
            self.add(set_entry.reps, set_entry.weight_kg, date)

    def records(self) -> List[RepRecord]:
        """Records sorted ascending by rep count."""
        return [self._records[reps] for reps in sorted(self._records)]

    def heaviest(self) -> Optional[LiftRecord]:
        """Heaviest weight at any rep count (earliest date on ties)."""
        best: Optional[RepRecord] = None
        for record in self._records.values():
            if (
                best is None
                or record.weight_kg > best.weight_kg
                or (record.weight_kg == best.weight_kg and record.date < best.date)
            ):
                best = record
        if best is None:
            return None
        return LiftRecord(weight_kg=best.weight_kg, date=best.date)

    def best_estimate(
        self,
        formula: Union[OneRepMaxFormula, str] = OneRepMaxFormula.BRZYCKI,
    ) -> Optional[LiftRecord]:
        """Highest estimated 1RM across all records, skipping invalid estimates."""
        best: Optional[LiftRecord] = None
        for record in self.records():
            estimate = estimate_one_rep_max(record.weight_kg, record.reps, formula)
            if estimate is None:
                continue
            if (
                best is None
                or estimate > best.weight_kg
                or (estimate == best.weight_kg and record.date < best.date)
            ):
                best = LiftRecord(weight_kg=estimate, date=record.date)
        return best
