"""Where: src/infinibrowser/domain/lineage.py
What: Build the request body for sharing a lineage.
Why: Keep the non-empty precondition and payload shape out of the HTTP facade.
"""

from __future__ import annotations

from .errors import EmptyLineageError
from .types import ResultElement, ShareLineagePayload, ShareLineageSteps


def final_element(steps: ShareLineageSteps) -> ResultElement:
    """Return the result element of the last step.

    Raises:
        EmptyLineageError: If ``steps`` is empty.
    """

    if not steps:
        raise EmptyLineageError()
    return steps[-1][2]


def build_share_payload(steps: ShareLineageSteps) -> ShareLineagePayload:
    """Describe a lineage by its final element plus every step.

    Steps are emitted as lists so the JSON body matches the array-of-arrays
    shape the service expects regardless of the sequence type passed in.
    """

    element = final_element(steps)
    return {
        "id": element["id"],
        "emoji": element["emoji"],
        "steps": [list(step) for step in steps],
    }


__all__ = ["build_share_payload", "final_element"]
