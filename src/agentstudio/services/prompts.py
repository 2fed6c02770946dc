"""Prompt templates for narration and artwork generation."""

DRAFT_SYSTEM_PROMPT = (
    "You are a seasoned video script writer. Produce structured narration "
    "with scene suggestions and clear pacing cues."
)

ENHANCE_SYSTEM_PROMPT = (
    "You elevate scripts into polished YouTube-ready narration. Improve flow, "
    "add storytelling beats, and end with the supplied call-to-action. "
    "Maintain length and respect the audience level."
)


def build_draft_prompt(topic: str, tone: str, duration_seconds: float, audience: str) -> str:
    """User message for the first-pass narration draft."""
    return (
        f"Topic: {topic}\n"
        f"Target audience: {audience}\n"
        f"Tone: {tone}\n"
        f"Desired duration: {duration_seconds:g} seconds\n"
        "\n"
        "Create a narration script with:\n"
        "- Hook\n"
        "- Three supporting segments (each with on-screen direction cues)\n"
        "- Closing with call-to-action placeholder\n"
        "- Estimated duration per segment\n"
        "- Short list of suggested accompanying visuals"
    )


def build_enhance_prompt(
    draft: str, topic: str, tone: str, audience: str, call_to_action: str
) -> str:
    """User message asking for a polished rewrite of the draft."""
    return (
        f"Topic: {topic}\n"
        f"Audience: {audience}\n"
        f"Preferred tone: {tone}\n"
        f"Call to action: {call_to_action}\n"
        "\n"
        "Script draft:\n"
        f"{draft}\n"
        "\n"
        "Refine the narration. Keep the structure, tighten pacing, add vivid "
        "transitions, and explicitly include the call-to-action in the closing."
    )


def build_image_prompt(topic: str) -> str:
    """Prompt for the background still behind the narration."""
    return (
        "Create a cinematic, modern, and high-contrast wide background image "
        f"that illustrates the theme: {topic}. Avoid text. Futurist lighting "
        "with gradients."
    )


def build_messages(system_prompt: str, user_prompt: str) -> list[dict]:
    """Role-tagged chat messages for the text service."""
    return [
        {"role": "system", "content": system_prompt},
        {"role": "user", "content": user_prompt},
    ]
