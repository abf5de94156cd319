"""Enum definitions shared by models and schemas."""

from enum import Enum


class UserRole(str, Enum):
    """Access level of an application user."""

    MANAGER = "manager"
    CONTRIBUTOR = "contributor"


class UtilityType(str, Enum):
    """Billing domain of a utility reading. Values are the provider names."""

    WATER = "MNWD"
    ELECTRICITY = "Casureco"


class GovIdType(str, Enum):
    """Accepted government-issued ID types for tenants and landlords."""

    NATIONAL_ID = "National ID"
    PASSPORT = "Passport"
    DRIVERS_LICENSE = "Driver's License"
    UMID = "UMID"
    PRC = "PRC"
    SSS_CARD = "SSS Card"
    VOTERS_ID = "Voter's ID"
    POSTAL_ID = "Postal ID"
    GSIS_CARD = "GSIS Card"
    PRC_ID = "PRC ID"
    SENIOR_CITIZEN_ID = "Senior Citizen ID"
