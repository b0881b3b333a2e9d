"""Enumeration types for customer records."""

from enum import Enum


class CustomerType(str, Enum):
    REGULAR = "Regular"
    VIP = "VIP"


class VipLevel(str, Enum):
    SILVER = "Silver"
    GOLD = "Gold"
    PLATINUM = "Platinum"
