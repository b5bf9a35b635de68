"""Rendering allocation results for callers.

Nothing here is used by the allocator itself.
"""

from dataclasses import asdict, fields
from typing import Any, Dict, List, Sequence

import pandas as pd

from .data import Assignment, MealBatch

ASSIGNMENT_COLUMNS = [f.name for f in fields(Assignment)]


def assignments_to_frame(assignments: Sequence[Assignment]) -> pd.DataFrame:
    """Assignment table, one row per assignment, in emission order."""
    return pd.DataFrame([asdict(a) for a in assignments], columns=ASSIGNMENT_COLUMNS)


def delivered_by_recipient(assignments: Sequence[Assignment]) -> pd.Series:
    """Total units per recipient id, in order of first delivery."""
    df = assignments_to_frame(assignments)
    return df.groupby('recipient_id', sort=False)['quantity'].sum()


def summarize(batch: MealBatch, assignments: Sequence[Assignment]) -> Dict[str, Any]:
    """Summarize one allocation run.

    Args:
        batch: The batch after ``allocate`` returned
        assignments: The assignments it returned

    Returns:
        Dictionary containing:
            - batch_id: Batch identifier
            - status: 'assigned', 'partial' or 'unassigned'
            - initial_quantity: Units in the batch before the run
            - allocated: Units handed out
            - remaining: Units still pending
            - n_assignments: Number of deliveries
            - n_recipients_served: Distinct recipients that received units
            - fill_ratio: allocated / initial_quantity
    """
    df = assignments_to_frame(assignments)
    allocated = int(df['quantity'].sum())

    return {
        "batch_id": batch.id,
        "status": batch.status.value,
        "initial_quantity": batch.initial_quantity,
        "allocated": allocated,
        "remaining": batch.quantity,
        "n_assignments": len(assignments),
        "n_recipients_served": int(df['recipient_id'].nunique()),
        "fill_ratio": allocated / batch.initial_quantity,
    }


def format_assignments(assignments: Sequence[Assignment]) -> List[str]:
    return [
        f"Batch {a.batch_id} -> Volunteer {a.volunteer_id} "
        f"-> Recipient {a.recipient_id} : {a.quantity} packets"
        for a in assignments
    ]
