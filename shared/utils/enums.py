from enum import Enum


class PortalUserRole(str, Enum):
    ADMIN = "Admin"
    MAKER = "Maker"
    CHECKER = "Checker"


class PortalUserStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"
