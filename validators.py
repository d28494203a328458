"""
Input validation schemas using Marshmallow for API endpoints.
"""
from marshmallow import Schema, fields, validate, EXCLUDE


PROVIDERS = ['gemini', 'openrouter']


class _RequestSchema(Schema):
    """Base schema: unknown keys are dropped rather than rejected."""

    class Meta:
        unknown = EXCLUDE


class StylesRequestSchema(_RequestSchema):
    """Validation schema for style suggestion requests."""
    provider = fields.Str(
        required=False,
        validate=validate.OneOf(PROVIDERS),
        error_messages={'invalid': 'Provider must be gemini or openrouter'}
    )
    idea = fields.Str(
        required=True,
        validate=validate.Length(min=1, max=8000),
        error_messages={
            'required': 'Idea field is required',
            'invalid': 'Idea must be a string'
        }
    )
    instructions = fields.Str(
        required=True,
        validate=validate.Length(min=1, max=8000),
        error_messages={
            'required': 'Instructions field is required',
            'invalid': 'Instructions must be a string'
        }
    )
    selected_model = fields.Str(
        required=False,
        data_key='selectedModel',
        error_messages={'invalid': 'Selected model must be a string'}
    )


class QuestionsRequestSchema(StylesRequestSchema):
    """Validation schema for clarifying question requests."""


class AnsweredQuestionSchema(_RequestSchema):
    text = fields.Str(required=True, validate=validate.Length(min=1))
    answer = fields.Str(required=True, validate=validate.Length(min=1))


class AppliedStylesSchema(_RequestSchema):
    primary = fields.Str(required=True, validate=validate.Length(min=1))
    modifier = fields.Str(required=False, allow_none=True)


class OptimizeRequestSchema(_RequestSchema):
    """Validation schema for optimized prompt requests."""
    provider = fields.Str(
        required=False,
        validate=validate.OneOf(PROVIDERS),
        error_messages={'invalid': 'Provider must be gemini or openrouter'}
    )
    idea = fields.Str(
        required=True,
        validate=validate.Length(min=1, max=10000),
        error_messages={'required': 'Idea field is required'}
    )
    instructions = fields.Str(
        required=True,
        validate=validate.Length(min=1, max=10000),
        error_messages={'required': 'Instructions field is required'}
    )
    answered_questions = fields.List(
        fields.Nested(AnsweredQuestionSchema),
        required=False,
        data_key='answeredQuestions',
        validate=validate.Length(max=10),
        load_default=list,
        error_messages={'invalid': 'Answered questions must be a list'}
    )
    applied_styles = fields.Nested(
        AppliedStylesSchema,
        required=True,
        data_key='appliedStyles',
        error_messages={'required': 'Applied styles are required'}
    )
    selected_models = fields.List(
        fields.Str(),
        required=False,
        data_key='selectedModels',
        error_messages={'invalid': 'Selected models must be a list of strings'}
    )
