from typing import Optional


class BaseExceptionWithMessage(Exception):
    message: str

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.message
        super().__init__(self.message)
