"""Capability contracts: what a double must implement."""

from .model import Contract, Member, MethodSignature, PropertySignature
from .reflection import contract_of

__all__ = [
    "Contract",
    "Member",
    "MethodSignature",
    "PropertySignature",
    "contract_of",
]
