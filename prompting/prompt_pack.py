"""
Prompt pack for the prompt assistant: one system prompt per workflow stage.
"""
from typing import Any, Dict, List


# Styles the model may recommend
STYLE_CATALOGUE = [
    "Instruction-based",
    "Role/Persona",
    "Format-Constrained",
    "Few-shot",
    "Zero-shot",
    "Chain-of-Thought",
    "Socratic",
    "Storytelling",
    "Roleplay",
    "Hypothetical",
    "Critique & Improve",
    "Iterative Refinement",
]

STYLES_SCHEMA = '{ "status": "success", "suggestedStyles": [{"id":"string","name":"string","explanation":"string","example":"string"}] }'
QUESTIONS_SCHEMA = '{ "status": "success", "clarifyingQuestions": [{"text":"string","options":["string"]}] }'
OPTIMIZE_SCHEMA = '{ "status": "success", "optimizedPrompt": "```<language>\\n<final prompt text>\\n```", "appliedStyles": ["string"] }'


def build_styles_prompt(payload: Dict[str, Any]) -> str:
    """Ask for the 2-3 most relevant prompting styles."""
    return (
        "You are a professional prompt engineer. Analyze the user's idea and instructions, then recommend "
        "the 2-3 most relevant prompting styles from this list:\n\n"
        f"[{', '.join(STYLE_CATALOGUE)}]\n\n"
        "For each recommended style, provide id, name, explanation (1-2 sentences), and a short example "
        "specific to the user's idea.\n"
        "Respond with EXACT JSON only matching:\n"
        f"{STYLES_SCHEMA}\n\n"
        f"User's Instructions: {payload.get('instructions', '')}\n"
        f"User's Idea: {payload.get('idea', '')}"
    )


def build_questions_prompt(payload: Dict[str, Any]) -> str:
    """Ask for 2-5 multiple-choice clarifying questions."""
    return (
        "You are a professional prompt engineer. Generate 2-5 highly specific clarifying questions tailored "
        "to the user's idea and instructions.\n"
        "Each question must include a short text and 4-6 multiple-choice options.\n"
        "Respond with EXACT JSON only matching:\n"
        f"{QUESTIONS_SCHEMA}\n\n"
        f"User's Instructions: {payload.get('instructions', '')}\n"
        f"User's Idea: {payload.get('idea', '')}"
    )


def format_answers(answered_questions: List[Dict[str, str]]) -> str:
    return "\n".join(f"Q: {q['text']}\nA: {q['answer']}" for q in answered_questions or [])


def build_optimize_prompt(payload: Dict[str, Any]) -> str:
    """Ask for the final optimized prompt as a single fenced code block."""
    styles = payload.get("applied_styles") or {}
    return (
        "You are a senior prompt engineer. Create one final optimized prompt as a single fenced code block "
        "that combines:\n"
        "- Role, Task, Context\n"
        "- Constraints, Tone, Audience, Format\n"
        "- Application of primary and optional modifier styles\n"
        "- Mandatory keywords/details from answers\n\n"
        "Respond with EXACT JSON only matching:\n"
        f"{OPTIMIZE_SCHEMA}\n\n"
        f"Primary style: {styles.get('primary') or ''}\n"
        f"Modifier style: {styles.get('modifier') or ''}\n"
        f"Instructions: {payload.get('instructions', '')}\n"
        f"Idea: {payload.get('idea', '')}\n"
        f"Answers:\n{format_answers(payload.get('answered_questions'))}"
    )
