"""Player command handlers for CQRS pattern"""
from .hire_merchant import HireMerchantCommand, HireMerchantHandler, HireResult
from .reset_player import ResetPlayerCommand, ResetPlayerHandler, ResetResult, build_default_player

__all__ = [
    'HireMerchantCommand',
    'HireMerchantHandler',
    'HireResult',
    'ResetPlayerCommand',
    'ResetPlayerHandler',
    'ResetResult',
    'build_default_player',
]
