"""Analysis prompt for the structured idea evaluation.

Embeds the user's idea into a fixed instruction for the schema-constrained
Gemini call. Pure templates, no external state.

Dependencies: None (pure prompt templates)
System role: Request builder for the analysis client
"""

ANALYSIS_PROMPT_TEMPLATE = """Analyze this startup idea: "{idea}".
Provide a detailed evaluation including SWOT, risk assessment, strategic suggestions, solutions to potential problems, and improvements for business plan and marketing.
Rate the idea with an overall evaluation score from 0 to 100 based on market viability, scalability, and technical feasibility.
Also provide mock data for market trends over time, revenue potential (a 5-year forecast, one entry per year), and market share.
Finish with a concise executive summary written in Markdown."""


def is_submittable(idea: str | None) -> bool:
    """Return True when the idea has non-whitespace content.

    Args:
        idea: Raw idea text from the user

    Returns:
        bool: Whether an evaluation may be started for this idea
    """
    return bool(idea and idea.strip())


def build_analysis_prompt(idea: str) -> str:
    """Build the structured-analysis prompt for an idea.

    Callers are expected to have checked ``is_submittable`` first.

    Args:
        idea: Idea text (surrounding whitespace is dropped)

    Returns:
        str: Prompt text for the analysis model
    """
    return ANALYSIS_PROMPT_TEMPLATE.format(idea=idea.strip())
