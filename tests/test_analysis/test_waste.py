"""Tests for the waste detector."""

from __future__ import annotations

from leanlens.analysis.waste import (
    assign_severity,
    deduplicate_wastes,
    detect_inventory_waste,
    detect_transportation_waste,
    detect_waiting_waste,
    detect_waste_in_step,
    detect_wastes,
)
from leanlens.models import Process, ProcessStep, WasteInstance
from leanlens.types import ProcessFrequency, ProcessId, Severity, StepId, WasteType


def _step(step_id: str = "s1", **overrides) -> ProcessStep:
    data = {
        "id": StepId(step_id),
        "name": "Prepare summary",
        "description": "Summarize figures",
        "responsible_role": "Analyst",
        "estimated_duration": 10,
    }
    data.update(overrides)
    return ProcessStep(**data)


def _process(steps: list[ProcessStep], frequency: ProcessFrequency = ProcessFrequency.DAILY) -> Process:
    return Process(id=ProcessId("p1"), name="Test Process", frequency=frequency, steps=steps)


# ---------------------------------------------------------------------------
# Severity
# ---------------------------------------------------------------------------


class TestAssignSeverity:
    def test_high_keyword_wins_regardless_of_duration(self) -> None:
        assert assign_severity("critical error every time", 1, ProcessFrequency.AD_HOC) == Severity.HIGH

    def test_medium_keyword(self) -> None:
        assert assign_severity("Happens sometimes", 500, ProcessFrequency.DAILY) == Severity.MEDIUM

    def test_low_keyword(self) -> None:
        assert assign_severity("A minor annoyance", 500, ProcessFrequency.DAILY) == Severity.LOW

    def test_medium_checked_before_low(self) -> None:
        assert assign_severity("minor issue that happens often", 1, ProcessFrequency.AD_HOC) == Severity.MEDIUM

    def test_high_checked_before_medium(self) -> None:
        assert assign_severity("often a major problem", 1, ProcessFrequency.AD_HOC) == Severity.HIGH

    def test_fallback_high(self) -> None:
        # 60 * 4 = 240
        assert assign_severity("no cue", 60, ProcessFrequency.DAILY) == Severity.HIGH

    def test_fallback_medium(self) -> None:
        # 20 * 3 = 60
        assert assign_severity("no cue", 20, ProcessFrequency.WEEKLY) == Severity.MEDIUM

    def test_fallback_boundaries_are_exclusive(self) -> None:
        assert assign_severity("no cue", 50, ProcessFrequency.AD_HOC) == Severity.LOW
        assert assign_severity("no cue", 40, ProcessFrequency.MULTIPLE_DAILY) == Severity.MEDIUM


# ---------------------------------------------------------------------------
# Per-step detection
# ---------------------------------------------------------------------------


class TestDetectWasteInStep:
    def test_no_match_returns_none(self) -> None:
        assert detect_waste_in_step(_step(), WasteType.TRANSPORTATION, ProcessFrequency.DAILY) is None

    def test_falls_back_to_step_description(self) -> None:
        step = _step(name="Send invoice", description="Email the invoice to client", pain_points=["Takes long"])
        waste = detect_waste_in_step(step, WasteType.TRANSPORTATION, ProcessFrequency.DAILY)
        assert waste is not None
        assert waste.type == WasteType.TRANSPORTATION
        assert waste.step_id == "s1"
        assert waste.description == "Email the invoice to client"

    def test_uses_first_matching_pain_point(self) -> None:
        step = _step(pain_points=["Screens are slow", "Have to forward files manually", "Must email twice"])
        waste = detect_waste_in_step(step, WasteType.TRANSPORTATION, ProcessFrequency.DAILY)
        assert waste is not None
        assert waste.description == "Have to forward files manually"

    def test_match_is_case_insensitive(self) -> None:
        step = _step(pain_points=["BLOCKED by finance"])
        assert detect_waste_in_step(step, WasteType.WAITING, ProcessFrequency.DAILY) is not None

    def test_severity_from_matched_text(self) -> None:
        step = _step(estimated_duration=1, pain_points=["critical error every time"])
        waste = detect_waste_in_step(step, WasteType.DEFECTS, ProcessFrequency.AD_HOC)
        assert waste is not None
        assert waste.severity == Severity.HIGH

    def test_impact_mentions_duration_and_frequency(self) -> None:
        step = _step(estimated_duration=45, pain_points=["Waiting on the client"])
        waste = detect_waste_in_step(step, WasteType.WAITING, ProcessFrequency.DAILY)
        assert waste is not None
        assert waste.estimated_impact == "Idle time of ~45 min while awaiting input/approval daily"

    def test_ad_hoc_label(self) -> None:
        step = _step(pain_points=["Lots of rework"])
        waste = detect_waste_in_step(step, WasteType.DEFECTS, ProcessFrequency.AD_HOC)
        assert waste is not None
        assert waste.estimated_impact.endswith("as needed")


class TestCategoryDetectors:
    def test_one_instance_per_matching_step(self) -> None:
        steps = [
            _step("s1", pain_points=["Waiting for sign-off"]),
            _step("s2"),
            _step("s3", description="On hold until Monday"),
        ]
        wastes = detect_waiting_waste(steps, ProcessFrequency.WEEKLY)
        assert [w.step_id for w in wastes] == ["s1", "s3"]

    def test_empty_steps(self) -> None:
        assert detect_transportation_waste([], ProcessFrequency.DAILY) == []


class TestInventoryWaste:
    def test_shared_output_flags_first_producer(self) -> None:
        steps = [
            _step("s1", name="Draft", outputs=["Report"]),
            _step("s2", name="Finalize", outputs=[" report "]),
        ]
        wastes = detect_inventory_waste(steps, ProcessFrequency.DAILY)
        assert len(wastes) == 1
        waste = wastes[0]
        assert waste.type == WasteType.INVENTORY
        assert waste.step_id == "s1"
        assert waste.severity == Severity.MEDIUM
        assert '"report"' in waste.description
        assert "2 steps" in waste.estimated_impact

    def test_unique_outputs_not_flagged(self) -> None:
        steps = [_step("s1", outputs=["A"]), _step("s2", outputs=["B"])]
        assert detect_inventory_waste(steps, ProcessFrequency.DAILY) == []

    def test_keyword_and_output_rule_both_emitted(self) -> None:
        steps = [
            _step("s1", name="Batch import", outputs=["Ledger"]),
            _step("s2", outputs=["ledger"]),
        ]
        wastes = detect_inventory_waste(steps, ProcessFrequency.DAILY)
        assert [w.step_id for w in wastes] == ["s1", "s1"]


# ---------------------------------------------------------------------------
# Combined detection
# ---------------------------------------------------------------------------


class TestDetectWastes:
    def test_efficient_step_has_no_waste(self) -> None:
        assert detect_wastes(_process([_step(estimated_duration=15)])) == []

    def test_detects_multiple_categories(self) -> None:
        process = _process([_step(pain_points=["manual data entry", "waiting for approval"])])
        types = {w.type for w in detect_wastes(process)}
        assert WasteType.SKILLS in types
        assert WasteType.WAITING in types
        assert WasteType.OVERPROCESSING in types

    def test_keyword_finding_wins_over_output_rule(self) -> None:
        process = _process(
            [
                _step("s1", name="Batch import", outputs=["Ledger"]),
                _step("s2", outputs=["ledger"]),
            ]
        )
        inventory = [w for w in detect_wastes(process) if w.type == WasteType.INVENTORY]
        assert len(inventory) == 1
        assert inventory[0].step_id == "s1"
        assert not inventory[0].description.startswith("Multiple steps")

    def test_no_duplicate_category_step_pairs(self) -> None:
        process = _process(
            [
                _step("s1", name="Send batch", outputs=["Pack", "Pack"], pain_points=["queue piles up", "backlog"]),
                _step("s2", name="Search files", outputs=["pack"], pain_points=["error", "rework", "manual"]),
                _step("s3", name="Wait for review", outputs=["PACK"], pain_points=["delay", "redundant copy"]),
            ]
        )
        wastes = detect_wastes(process)
        keys = [(w.type, w.step_id) for w in wastes]
        assert len(keys) == len(set(keys))

    def test_emission_follows_category_order(self) -> None:
        process = _process([_step(pain_points=["manual rework", "send by email"])])
        types = [w.type for w in detect_wastes(process)]
        assert types == [WasteType.TRANSPORTATION, WasteType.DEFECTS, WasteType.SKILLS]

    def test_deterministic(self) -> None:
        process = _process([_step(pain_points=["manual rework", "waiting"]), _step("s2", outputs=["x"])])
        assert detect_wastes(process) == detect_wastes(process)


class TestDeduplicateWastes:
    def test_keeps_first_per_key(self) -> None:
        first = WasteInstance(
            type=WasteType.DEFECTS,
            step_id=StepId("s1"),
            description="first",
            severity=Severity.LOW,
            estimated_impact="",
        )
        second = first.model_copy(update={"description": "second"})
        other = first.model_copy(update={"step_id": StepId("s2")})
        assert deduplicate_wastes([first, second, other]) == [first, other]
