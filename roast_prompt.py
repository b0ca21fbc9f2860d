SYSTEM_PROMPT = "You are a brutally honest SaaS copy expert."


def get_roast_prompt(url: str) -> str:
    """
    Build the user instruction for a landing-page roast.

    The section headers requested here are the ones the response parser
    recognizes (Score, What's good, What's confusing, Improvements).

    Args:
        url: Landing page the model should critique

    Returns:
        Prompt string for the user message
    """
    return f"""Roast this SaaS landing page: {url}

Reply in exactly this format:

Score: <number>/100
What's good:
- <strength>
What's confusing:
- <point of confusion>
Improvements:
- <clear, specific improvement>

Be direct and specific. No preamble, no closing remarks."""


def build_messages(url: str) -> list:
    """Two-message conversation sent to the chat-completion API"""
    return [
        {"role": "system", "content": SYSTEM_PROMPT},
        {"role": "user", "content": get_roast_prompt(url)},
    ]


# Canned completion returned when mock mode is enabled
MOCK_ROAST = """Score: 7/10
What's good:
- Clear headline
- Strong value proposition
What's confusing:
- CTA could be more prominent
Improvements:
- Add testimonials
- Clarify pricing earlier"""
