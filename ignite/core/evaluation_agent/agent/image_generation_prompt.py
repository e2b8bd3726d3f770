"""Hero image prompt for Gemini image generation.

Dependencies: None (pure prompt templates)
System role: Request builder for the image client
"""

IMAGE_PROMPT_TEMPLATE = """A cinematic, high-quality, professional business-related image representing the startup idea: {idea}.
Style: Modern, sleek, futuristic, corporate but innovative. 4k resolution, dramatic lighting."""


def build_image_prompt(idea: str) -> str:
    """Build the hero image prompt for an idea.

    Args:
        idea: Idea text (surrounding whitespace is dropped)

    Returns:
        str: Prompt text for the image model
    """
    return IMAGE_PROMPT_TEMPLATE.format(idea=idea.strip())
