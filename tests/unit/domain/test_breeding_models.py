from __future__ import annotations

from datetime import date

from src.domain.models.litter import Litter
from src.domain.models.offspring import Offspring
from src.domain.models.performance_summary import PerformanceSummary
from src.domain.models.report import Report, ReportEntry, ReportResults
from src.domain.value_objects.father import UNKNOWN_FATHER_ID, FatherRef
from src.domain.value_objects.sex import OffspringSex


def test_father_ref_unknown_variants_are_equal():
    assert FatherRef.of(None) == FatherRef.of("  ") == FatherRef.unknown()
    assert FatherRef.of(None).value == UNKNOWN_FATHER_ID
    assert FatherRef.of(None).father_id is None
    assert str(FatherRef.unknown()) == "none"
    assert FatherRef.of(" F1 ").father_id == "F1"


def test_litter_identity_key_uses_sentinel_and_describe():
    litter = Litter.create("M1", date(2024, 5, 1))
    assert litter.identity_key == ("M1", UNKNOWN_FATHER_ID, date(2024, 5, 1))
    assert litter.describe() == "mother M1, father none, and birth date 2024-05-01"
    assert litter.id


def test_death_resets_weaned_flag():
    pup = Offspring.create("P1", "L1", "male")
    assert pup.sex is OffspringSex.MALE
    pup.mark_weaned()
    assert pup.is_weaned and pup.is_alive

    pup.mark_deceased()
    assert not pup.is_alive
    assert not pup.is_weaned


def test_report_extend_clears_summary_and_bumps_version():
    report = Report.create("R")
    report.attach_summary(PerformanceSummary(insights="old"))
    version = report.version

    report.extend([ReportEntry("M1", date(2024, 1, 1), date(2024, 2, 1))], ReportResults())

    assert report.summary is None
    assert report.version == version + 1
    assert report.targets == ["M1"]
    assert report.has_entry(ReportEntry("M1", date(2024, 1, 1), date(2024, 2, 1)))


def test_summary_round_trips_camel_case_document():
    summary = PerformanceSummary(high_performers=["M1"], insights="ok")
    data = summary.to_dict()
    assert data["highPerformers"] == ["M1"]
    assert PerformanceSummary.from_dict(data) == summary
