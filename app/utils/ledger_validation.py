"""Ledger validation utilities."""
import re
from enum import Enum
from typing import Optional, Sequence


class ErrorCode(str, Enum):
    EMPTY_NAME = "EmptyName"
    ALREADY_REGISTERED = "AlreadyRegistered"
    NOT_REGISTERED = "NotRegistered"
    EMPTY_LABEL = "EmptyLabel"
    NO_PARTICIPANTS = "NoParticipants"
    LENGTH_MISMATCH = "LengthMismatch"
    INVALID_IDENTITY = "InvalidIdentity"
    NEGATIVE_AMOUNT = "NegativeAmount"
    ID_OUT_OF_BOUNDS = "IdOutOfBounds"
    NO_EXPENSES = "NoExpenses"
    NON_POSITIVE_AMOUNT = "NonPositiveAmount"


class LedgerError(Exception):
    """Base exception for every rejected ledger operation."""
    code: ErrorCode

    def __init__(self, message: str, details: Optional[dict] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self):
        if self.details:
            details_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({details_str})"
        return self.message


class EmptyNameError(LedgerError):
    code = ErrorCode.EMPTY_NAME


class AlreadyRegisteredError(LedgerError):
    code = ErrorCode.ALREADY_REGISTERED


class NotRegisteredError(LedgerError):
    code = ErrorCode.NOT_REGISTERED


class EmptyLabelError(LedgerError):
    code = ErrorCode.EMPTY_LABEL


class NoParticipantsError(LedgerError):
    code = ErrorCode.NO_PARTICIPANTS


class LengthMismatchError(LedgerError):
    code = ErrorCode.LENGTH_MISMATCH


class InvalidIdentityError(LedgerError):
    code = ErrorCode.INVALID_IDENTITY


class NegativeAmountError(LedgerError):
    code = ErrorCode.NEGATIVE_AMOUNT


class IdOutOfBoundsError(LedgerError):
    code = ErrorCode.ID_OUT_OF_BOUNDS


class NoExpensesError(LedgerError):
    code = ErrorCode.NO_EXPENSES


class NonPositiveAmountError(LedgerError):
    code = ErrorCode.NON_POSITIVE_AMOUNT


# Matches "", "0x", "0", "0x0000...": the zero address in any spelling.
_ZERO_IDENTITY = re.compile(r"^(0x)?0*$", re.IGNORECASE)


def is_null_identity(identity: Optional[str]) -> bool:
    """True for None, blank strings and all-zero hex values."""
    if identity is None or not isinstance(identity, str):
        return True
    return bool(_ZERO_IDENTITY.match(identity.strip()))


def validate_name(name: Optional[str]) -> str:
    """Return the trimmed name, or raise EmptyNameError."""
    trimmed = (name or "").strip()
    if not trimmed:
        raise EmptyNameError("Name must not be empty")
    return trimmed


def validate_identity(identity: Optional[str]) -> None:
    if is_null_identity(identity):
        raise InvalidIdentityError("Identity must not be null", {"identity": identity})


def validate_expense(
    label: Optional[str],
    participants: Sequence[str],
    paid_amounts: Sequence[int],
    owed_amounts: Sequence[int],
) -> None:
    """
    Validate an expense before anything is written.

    Rules, checked in this order:
    - label must be non-empty after trimming
    - at least one participant
    - participants, paid and owed lists have equal length
    - no participant identity is null
    - no amount is negative
    """
    if not (label or "").strip():
        raise EmptyLabelError("Expense label must not be empty")

    if not participants:
        raise NoParticipantsError("Expense needs at least one participant")

    if not (len(participants) == len(paid_amounts) == len(owed_amounts)):
        raise LengthMismatchError(
            "Participants, paid amounts and owed amounts must have the same length",
            {
                "participants": len(participants),
                "paid": len(paid_amounts),
                "owed": len(owed_amounts),
            },
        )

    for position, identity in enumerate(participants):
        if is_null_identity(identity):
            raise InvalidIdentityError(
                f"Participant at position {position} has a null identity"
            )

    for position, (paid, owed) in enumerate(zip(paid_amounts, owed_amounts)):
        if paid < 0 or owed < 0:
            raise NegativeAmountError(
                f"Participant at position {position} has a negative amount",
                {"paid": paid, "owed": owed},
            )


def validate_settlement(payer: Optional[str], payee: Optional[str], amount: int) -> None:
    if is_null_identity(payer):
        raise InvalidIdentityError("Payer must not be null")
    if is_null_identity(payee):
        raise InvalidIdentityError("Payee must not be null")
    if payee == payer:
        raise InvalidIdentityError("Payer and payee must differ", {"identity": payer})
    if amount <= 0:
        raise NonPositiveAmountError(
            f"Settlement amount must be positive: {amount}"
        )
