"""Offer request lifecycle states."""

from enum import Enum


class RequestStatus(str, Enum):
    """Status of an offer request.

    Only ACTIVE requests can be answered with an offer.
    """

    ACTIVE = "Aktif"
    PASSIVE = "Pasif"
    PENDING = "Beklemede"
    CANCELLED = "Iptal"
    OFFER_RECEIVED = "TeklifAlindi"
    COMPLETED = "Tamamlandi"
