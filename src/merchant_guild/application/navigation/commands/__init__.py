"""Navigation command handlers"""
from .dispatch_merchant import DispatchMerchantCommand, DispatchMerchantHandler, DispatchResult

__all__ = ['DispatchMerchantCommand', 'DispatchMerchantHandler', 'DispatchResult']
