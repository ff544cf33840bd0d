"""Domain value objects.

Immutable inputs and outputs of the access policy.
"""

from firedesk.domain.value_objects.actor import Actor
from firedesk.domain.value_objects.decision import Decision
from firedesk.domain.value_objects.ownership import OwnershipView

__all__ = [
    "Actor",
    "Decision",
    "OwnershipView",
]
