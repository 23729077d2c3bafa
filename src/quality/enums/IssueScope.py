from enum import Enum as PyEnum


class IssueScope(PyEnum):
    TOTAL = "TOTAL"
    NEW = "NEW"
