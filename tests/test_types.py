from __future__ import annotations

from leanlens.types import AssessmentStatus, ProcessFrequency, Severity, WasteType


class TestProcessFrequency:
    def test_values(self):
        assert [f.value for f in ProcessFrequency] == [
            "multiple_daily",
            "daily",
            "weekly",
            "monthly",
            "quarterly",
            "ad_hoc",
        ]

    def test_string_comparison(self):
        assert ProcessFrequency.DAILY == "daily"


class TestWasteType:
    def test_timwoods_order(self):
        assert [w.value for w in WasteType] == [
            "transportation",
            "inventory",
            "motion",
            "waiting",
            "overproduction",
            "overprocessing",
            "defects",
            "skills",
        ]


class TestSeverity:
    def test_values(self):
        assert {s.value for s in Severity} == {"low", "medium", "high"}

    def test_from_string(self):
        assert Severity("high") is Severity.HIGH


class TestAssessmentStatus:
    def test_values(self):
        assert AssessmentStatus.IN_PROGRESS == "in_progress"
        assert AssessmentStatus.COMPLETED == "completed"
        assert AssessmentStatus.ARCHIVED == "archived"
