class DomainException(Exception):
    """Base exception for all domain errors"""
    kind = "DomainError"


class NotFoundError(DomainException):
    """Base for lookups of unknown merchants, goods, routes or records"""
    kind = "NotFound"


class MerchantNotFoundError(NotFoundError):
    """Raised when no hired merchant carries the requested name"""
    pass


class GoodNotFoundError(NotFoundError):
    """Raised when a good is not traded in the requested market list"""
    pass


class RouteNotFoundError(NotFoundError):
    """Raised when two cities are not directly connected"""
    pass


class CityNotFoundError(NotFoundError):
    """Raised when a city id is not part of the reference catalog"""
    pass


class RecordNotFoundError(NotFoundError):
    """Raised when a persisted record is missing from the store"""
    pass


class InsufficientFundsError(DomainException):
    """Raised when the player doesn't have enough gold for a purchase"""
    kind = "InsufficientFunds"


class InsufficientStockError(DomainException):
    """Raised when a merchant carries fewer units than requested for sale"""
    kind = "InsufficientStock"


class CapacityExceededError(DomainException):
    """Raised when loading cargo would exceed a merchant's capacity"""
    kind = "CapacityExceeded"


class AllMerchantsHiredError(DomainException):
    """Raised when hiring while every merchant is already on the payroll"""
    kind = "AllMerchantsHired"


class MerchantNotFreeError(DomainException):
    """Raised when a traveling merchant is asked to trade or depart"""
    kind = "MerchantNotFree"


class InvalidRequestError(DomainException):
    """Raised when a command carries malformed input (bad action, quantity)"""
    kind = "InvalidRequest"


class PersistenceError(DomainException):
    """Raised when reading or writing a record fails"""
    kind = "PersistenceFailure"
