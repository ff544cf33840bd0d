"""Decision value object.

The verdicts for one actor and one resource instance, used by callers to
show or hide controls.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True, kw_only=True)
class Decision:
    """Per-resource verdicts.

    Attributes:
        can_respond: Answer an offer request with an offer (OfferRequests only).
    """

    can_view: bool = False
    can_create: bool = False
    can_update: bool = False
    can_delete: bool = False
    can_respond: bool = False
