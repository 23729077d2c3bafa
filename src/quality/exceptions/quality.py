from exceptions import BaseExceptionWithMessage


class InvalidThresholdException(BaseExceptionWithMessage):
    message = "Недопустимое значение порога качества"


class InvalidAnalysisResultException(BaseExceptionWithMessage):
    message = "Недопустимые результаты анализа"
