from gateways.sonarqube.schemas import IssueCounts, SonarQubeResults
from quality.schemas import AnalysisRunCounts

_EMPTY = IssueCounts(total=0, critical=0, major=0, minor=0)


def to_analysis_run_counts(results: SonarQubeResults) -> AnalysisRunCounts:
    """
    Переводит результаты SonarQube в количество замечаний запуска анализа.

    critical -> high, major -> normal, minor -> low. Если нет данных по новому коду,
    новых замечаний считается 0.
    """
    overall = results.sonarqube.issues()
    new = results.new_code.issues() if results.new_code else _EMPTY

    return AnalysisRunCounts(
        total=overall.total,
        total_high=overall.critical,
        total_normal=overall.major,
        total_low=overall.minor,
        new=new.total,
        new_high=new.critical,
        new_normal=new.major,
        new_low=new.minor,
    )
