from .cleaner import CleanerProtocol
from .logging import LoggerFactoryProtocol, LoggerLikeProtocol
from .walker import WalkerProtocol

__all__ = [
    'CleanerProtocol',
    'LoggerFactoryProtocol',
    'LoggerLikeProtocol',
    'WalkerProtocol',
]
