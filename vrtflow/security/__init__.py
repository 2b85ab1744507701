# Caller identity

from .caller import Caller, ROLE_SUPER_ADMIN, get_caller

__all__ = ["Caller", "ROLE_SUPER_ADMIN", "get_caller"]
