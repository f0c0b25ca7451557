"""Enumeration types for the back-office domain model."""

from enum import Enum


class YesNo(str, Enum):
    """Yes/No flag as stored and sent on the wire."""
    YES = "Yes"
    NO = "No"


class CleaningStatus(str, Enum):
    """Unit cleaning state at move-out."""
    CLEANED = "cleaned"
    UNCLEANED = "uncleaned"


class MoveOutFormStatus(str, Enum):
    """Whether the tenant filled the move-out form."""
    FILLED = "filled"
    NOT_FILLED = "not filled"


class EvictionOutcome(str, Enum):
    """How an eviction case was resolved."""
    EVICTED = "Evicted"
    PAYMENT_PLAN = "Payment Plan"


class EvictionFlag(str, Enum):
    """Computed eviction column."""
    NONE = ""
    ALERT = "Alert"
    HAVE_AN_EXCEPTION = "Have An Exception"


class PaymentStatus(str, Enum):
    """Computed payment status (owes vs paid)."""
    PAID = "Paid"
    DIDNT_PAY = "Didn't Pay"
    PAID_PARTLY = "Paid Partly"
    OVERPAID = "Overpaid"


class VendorTaskStatusFilter(str, Enum):
    """Special values accepted by the vendor task status filter."""
    EXCLUDE_COMPLETED = "exclude_completed"
    ALL = "all"


VENDOR_TASK_COMPLETED = "Completed"
LEASE_STATUS_ENDED = "ended"
