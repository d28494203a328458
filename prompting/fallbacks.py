"""
Static fallback responses, one per shape kind.

These are returned whenever a provider response cannot be recovered or does
not look like the expected shape, so the UI always has something to render.
They are hand-authored and never built from user input.
"""

from typing import Any, Dict

from .models import (
    ClarifyingQuestions,
    OptimizedPrompt,
    Question,
    ShapeKind,
    StyleSuggestion,
    StyleSuggestions,
)


FALLBACK_STYLES = StyleSuggestions(
    suggested_styles=[
        StyleSuggestion(
            id="instruction",
            name="Instruction-based",
            explanation="Direct, explicit instructions to guide the model.",
            example="Write a step-by-step guide to ...",
        ),
        StyleSuggestion(
            id="role",
            name="Role/Persona",
            explanation="Assign the model a specific role for targeted output.",
            example="You are a veteran UI designer ...",
        ),
        StyleSuggestion(
            id="format",
            name="Format-Constrained",
            explanation="Define strict output format for consistency.",
            example="Respond only in JSON with fields ...",
        ),
    ]
)

FALLBACK_QUESTIONS = ClarifyingQuestions(
    clarifying_questions=[
        Question(text="Who is the target audience?", options=["General", "Technical", "Executives", "Students"]),
        Question(text="What tone should be used?", options=["Professional", "Friendly", "Persuasive", "Neutral"]),
        Question(text="Any mandatory constraints?", options=["Length limit", "Formatting", "Keywords", "Citations"]),
    ]
)

FALLBACK_OPTIMIZED_PROMPT = OptimizedPrompt(
    optimized_prompt=(
        "```text\n"
        "You are a helpful assistant.\n"
        "Task: Optimize the idea below using the instructions provided.\n"
        "Context: Ensure clarity, structure, and actionable steps.\n"
        "Constraints: Keep it concise and specific.\n"
        "Audience: General.\n"
        "Format: Clear sections with bullet points.\n"
        "\n"
        "Idea: <your idea>\n"
        "Instructions: <your instructions>\n"
        "```"
    ),
    applied_styles=[],
)

_FALLBACKS = {
    ShapeKind.STYLE_SUGGESTIONS: FALLBACK_STYLES,
    ShapeKind.CLARIFYING_QUESTIONS: FALLBACK_QUESTIONS,
    ShapeKind.OPTIMIZED_PROMPT: FALLBACK_OPTIMIZED_PROMPT,
}


def fallback_for(shape: ShapeKind) -> Dict[str, Any]:
    """Return a fresh JSON-ready copy of the fallback for a shape kind."""
    return _FALLBACKS[ShapeKind(shape)].to_dict()
