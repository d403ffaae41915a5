"""Automation opportunity analysis.

Every step gets exactly one :class:`~leanlens.models.AutomationOpportunity`
grading how much it would gain from automation (potential), how hard that
automation would be (complexity), and the return tier that follows from
the two, along with candidate tools.
"""

from __future__ import annotations

from collections.abc import Sequence

from leanlens._text import contains_any, join_text
from leanlens.models import AutomationOpportunity, ProcessStep
from leanlens.types import Severity

HIGH_POTENTIAL_KEYWORDS: tuple[str, ...] = (
    "manual",
    "repetitive",
    "copy paste",
    "data entry",
    "spreadsheet",
    "excel",
)
MEDIUM_POTENTIAL_KEYWORDS: tuple[str, ...] = ("slow", "tedious", "time-consuming", "routine")

# Steps longer than this are worth partially automating even without keyword cues.
LONG_STEP_MINUTES = 30

HIGH_COMPLEXITY_KEYWORDS: tuple[str, ...] = (
    "decision",
    "judgment",
    "complex",
    "custom",
    "exception",
    "approval required",
)
MEDIUM_COMPLEXITY_KEYWORDS: tuple[str, ...] = ("conditional", "variable", "multiple systems", "integration")

ROI_MATRIX: dict[tuple[Severity, Severity], Severity] = {
    (Severity.HIGH, Severity.LOW): Severity.HIGH,
    (Severity.HIGH, Severity.MEDIUM): Severity.HIGH,
    (Severity.MEDIUM, Severity.LOW): Severity.HIGH,
    (Severity.MEDIUM, Severity.MEDIUM): Severity.MEDIUM,
    (Severity.HIGH, Severity.HIGH): Severity.MEDIUM,
    (Severity.LOW, Severity.LOW): Severity.MEDIUM,
}

AUTOMATION_TOOLS: dict[str, tuple[str, ...]] = {
    "spreadsheet": ("n8n", "Make", "Zapier", "Power Automate"),
    "excel": ("n8n", "Make", "Zapier", "Power Automate"),
    "email": ("n8n", "Zapier", "SendGrid", "Mailchimp"),
    "crm": ("GoHighLevel", "HubSpot", "Salesforce"),
    "data entry": ("n8n", "UiPath", "Automation Anywhere"),
    "document": ("DocuSign", "PandaDoc", "Adobe Sign"),
    "scheduling": ("Calendly", "Acuity", "GoHighLevel"),
}
DEFAULT_TOOLS: tuple[str, ...] = ("n8n", "Make", "Zapier")

DESCRIPTION_TEMPLATES: dict[Severity, str] = {
    Severity.HIGH: (
        '"{name}" has high automation potential due to manual, repetitive tasks that can be streamlined.'
    ),
    Severity.MEDIUM: '"{name}" could benefit from partial automation to reduce time and effort.',
    Severity.LOW: '"{name}" has limited automation potential but may benefit from process improvements.',
}


def assess_automation_potential(step: ProcessStep) -> Severity:
    text = join_text(step.name, step.description, step.pain_points, step.tools)
    if contains_any(text, HIGH_POTENTIAL_KEYWORDS):
        return Severity.HIGH
    if contains_any(text, MEDIUM_POTENTIAL_KEYWORDS):
        return Severity.MEDIUM
    if step.estimated_duration > LONG_STEP_MINUTES:
        return Severity.MEDIUM
    return Severity.LOW


def assess_automation_complexity(step: ProcessStep) -> Severity:
    """Grade implementation complexity; more tools means more integration work."""
    text = join_text(step.name, step.description, step.pain_points)
    if contains_any(text, HIGH_COMPLEXITY_KEYWORDS):
        return Severity.HIGH
    if contains_any(text, MEDIUM_COMPLEXITY_KEYWORDS):
        return Severity.MEDIUM
    if len(step.tools) > 3:
        return Severity.HIGH
    if len(step.tools) > 1:
        return Severity.MEDIUM
    return Severity.LOW


def calculate_roi_potential(potential: Severity, complexity: Severity) -> Severity:
    return ROI_MATRIX.get((potential, complexity), Severity.LOW)


def suggest_automation_tools(step: ProcessStep) -> list[str]:
    text = join_text(step.name, step.description, step.pain_points, step.tools).lower()

    suggested: list[str] = []
    for keyword, tools in AUTOMATION_TOOLS.items():
        if keyword not in text:
            continue
        for tool in tools:
            if tool not in suggested:
                suggested.append(tool)

    return suggested or list(DEFAULT_TOOLS)


def analyze_step(step: ProcessStep) -> AutomationOpportunity:
    potential = assess_automation_potential(step)
    complexity = assess_automation_complexity(step)
    return AutomationOpportunity(
        step_id=step.id,
        potential=potential,
        complexity=complexity,
        roi_potential=calculate_roi_potential(potential, complexity),
        suggested_tools=suggest_automation_tools(step),
        description=DESCRIPTION_TEMPLATES[potential].format(name=step.name),
    )


def analyze_automation_opportunities(steps: Sequence[ProcessStep]) -> list[AutomationOpportunity]:
    """One opportunity per step, in step order."""
    return [analyze_step(step) for step in steps]
