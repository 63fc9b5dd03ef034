from enum import Enum


class MerchantRegistrationStatus(str, Enum):
    DRAFT = "Draft"
    REVIEW = "Review"
    APPROVED = "Approved"
    REJECTED = "Rejected"
    REVERTED = "Reverted"


class MerchantAllowBlockStatus(str, Enum):
    PENDING = "Pending"
    ALLOWED = "Allowed"
    BLOCKED = "Blocked"


class NumberOfEmployees(str, Enum):
    ONE_TO_FIVE = "1 - 5"
    SIX_TO_TEN = "6 - 10"
    ELEVEN_TO_FIFTY = "11 - 50"
    FIFTY_ONE_TO_ONE_HUNDRED = "51 - 100"
    ONE_HUNDRED_PLUS = "100 +"


class MerchantType(str, Enum):
    INDIVIDUAL = "Individual"
    SMALL_SHOP = "Small Shop"
    CHAIN_STORE = "Chain Store"


class MerchantLocationType(str, Enum):
    PHYSICAL = "Physical"
    VIRTUAL = "Virtual"


class BusinessOwnerIDType(str, Enum):
    NATIONAL_ID = "National ID"
    PASSPORT = "Passport"
