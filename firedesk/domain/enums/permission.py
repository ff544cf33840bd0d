"""Permission components for authorization.

ResourceKind and Operation together identify one cell of the access policy
table. ResourceKind values double as the audit trail's table-kind names.

Usage:
    from firedesk.domain.enums import Operation, ResourceKind

    allowed = authorize(actor, Operation.DELETE, ResourceKind.DEVICES, ownership)
"""

from enum import Enum


class ResourceKind(str, Enum):
    """Resources protected by the access policy.

    String Enum:
        Values are the names written to the audit ``tables`` lookup.
    """

    DEVICES = "Devices"
    """Fire extinguishers and other serviced devices."""

    APPOINTMENTS = "Appointments"
    """Service appointments created by providers for customers."""

    INSTITUTIONS = "Institutions"
    """Customer and provider organisations (tenants)."""

    ISG_MEMBERS = "IsgMembers"
    """Occupational safety (ISG) staff records."""

    MAINTENANCE_CARDS = "MaintenanceCards"
    """Maintenance records written by providers for customer devices."""

    NOTIFICATIONS = "Notifications"
    """In-app notifications."""

    OFFER_REQUESTS = "OfferRequests"
    """Customer requests for service offers."""

    OFFER_CARDS = "OfferCards"
    """Provider offers answering an offer request."""

    USERS = "User"
    """User accounts."""

    LOGS = "Logs"
    """Audit log listing (admin only)."""

    @classmethod
    def values(cls) -> list[str]:
        """Get all resource values as strings.

        Returns:
            list[str]: List of resource values.
        """
        return [resource.value for resource in cls]


class Operation(str, Enum):
    """Operations that can be performed on resources."""

    VIEW = "view"
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"
    RESPOND = "respond"
    """Answer an offer request with an offer."""

    @classmethod
    def values(cls) -> list[str]:
        """Get all operation values as strings."""
        return [operation.value for operation in cls]
