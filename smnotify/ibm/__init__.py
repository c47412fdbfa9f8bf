"""IBM Cloud resource implementations."""

from .en_registration import EnRegistration, EnRegistrationModel
from .session import ClientSession

__all__ = [
    "ClientSession",
    "EnRegistration",
    "EnRegistrationModel",
]
