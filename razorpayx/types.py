"""
Typed shapes for RazorpayX request and response bodies.

Everything here is a ``TypedDict`` so decoded JSON can be passed around
unchanged while still being checked by a type checker. Where a payout must
name exactly one destination, the two forms are separate variants joined
by a ``Union`` instead of two optional keys.
"""

from typing import Dict, List, Literal, Optional, TypedDict, Union

PayoutStatusLiteral = Literal[
    "queued",
    "pending",
    "rejected",
    "processing",
    "processed",
    "cancelled",
    "reversed",
]
PayoutModeLiteral = Literal["UPI", "NEFT", "RTGS", "IMPS", "card"]
CurrencyLiteral = Literal["INR"]

Notes = Dict[str, str]


class Identified(TypedDict):
    """Generic entity fields; payouts carry no "active" flag."""
    id: str
    created_at: int


# "from" is a keyword, hence the functional form
Pageable = TypedDict(
    "Pageable",
    {"count": int, "skip": int, "from": int, "to": int},
    total=False,
)


# Contacts and fund accounts

class _ContactRequired(TypedDict):
    name: str


class Contact(_ContactRequired, total=False):
    email: str
    contact: str
    # employee, vendor, customer, self or any custom type
    type: str
    reference_id: str
    notes: Notes


class BankAccount(TypedDict):
    name: str
    ifsc: str
    account_number: str


class Vpa(TypedDict):
    address: str


class FundAccountBankWithContact(TypedDict):
    account_type: Literal["bank_account"]
    bank_account: BankAccount
    contact: Contact


class FundAccountVpaWithContact(TypedDict):
    account_type: Literal["vpa"]
    vpa: Vpa
    contact: Contact


InlineFundAccount = Union[FundAccountBankWithContact, FundAccountVpaWithContact]


# Payouts

class StatusDetails(TypedDict, total=False):
    source: Optional[str]
    reason: Optional[str]
    description: Optional[str]


class _PayoutRequired(Identified):
    entity: Literal["payout"]
    # Amount in paise
    amount: int
    currency: CurrencyLiteral
    status: PayoutStatusLiteral
    # Unset until the bank settles the transfer
    utr: Optional[str]
    mode: PayoutModeLiteral


class _PayoutBase(_PayoutRequired, total=False):
    account_number: str
    notes: Notes
    fees: int
    tax: int
    # See constants.PayoutPurpose for the common values
    purpose: str
    reference_id: str
    narration: str
    status_details: Optional[StatusDetails]


class PayoutToFundAccount(_PayoutBase):
    fund_account: InlineFundAccount


class PayoutToFundAccountId(_PayoutBase):
    fund_account_id: str


Payout = Union[PayoutToFundAccount, PayoutToFundAccountId]


class PayoutCollection(TypedDict):
    entity: str
    count: int
    items: List[Payout]


class _PayoutCreateRequired(TypedDict):
    amount: int
    currency: CurrencyLiteral
    mode: PayoutModeLiteral


class _PayoutCreateBase(_PayoutCreateRequired, total=False):
    account_number: str
    purpose: str
    reference_id: str
    narration: str
    notes: Notes
    queue_if_low_balance: bool


class PayoutCreateWithFundAccount(_PayoutCreateBase):
    fund_account: InlineFundAccount


class PayoutCreateWithFundAccountId(_PayoutCreateBase):
    fund_account_id: str


PayoutCreateParams = Union[PayoutCreateWithFundAccount, PayoutCreateWithFundAccountId]


class PayoutFilter(Pageable, total=False):
    fund_account_id: str
    contact_id: str
    mode: PayoutModeLiteral
    reference_id: str
    status: PayoutStatusLiteral
