from enum import Enum as PyEnum


class Severity(PyEnum):
    """Порядок членов задаёт порядок сообщений внутри категории порогов."""

    ALL = "ALL"
    HIGH = "HIGH"
    NORMAL = "NORMAL"
    LOW = "LOW"
