from exceptions.base import BaseExceptionWithMessage

__all__ = [
    "BaseExceptionWithMessage",
]
