"""Prompt templates for legal document analysis."""

from enum import StrEnum


class AnalysisTask(StrEnum):
    """Generation tasks run against every extracted document."""

    SUMMARY = "summary"
    KEY_TERMS = "key_terms"
    RISK_ASSESSMENT = "risk_assessment"


PROMPT_TEMPLATES: dict[AnalysisTask, str] = {
    AnalysisTask.SUMMARY: "Summarize this legal document:\n\n{text}",
    AnalysisTask.KEY_TERMS: "Extract key terms in bullet-point format:\n\n{text}",
    AnalysisTask.RISK_ASSESSMENT: (
        "Provide a risk assessment in this format:\n"
        "- Risk Item: Description (Severity: Low/Medium/High)\n"
        "\n"
        "For this legal document:\n\n{text}"
    ),
}


def render_prompt(task: AnalysisTask, text: str) -> str:
    """Fill the template for ``task`` with the document text."""
    # str.replace so braces inside the document are left alone
    return PROMPT_TEMPLATES[task].replace("{text}", text)
