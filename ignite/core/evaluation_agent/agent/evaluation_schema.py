"""Evaluation agent schemas for structured output and validation.

This module defines:
- Pydantic models describing the analysis object Gemini must return
- The google.genai response schema sent with the request, derived from
  the models by response_schema_for
- HeroImage, the optional inline picture attached to a successful evaluation

ANALYSIS_RESPONSE_SCHEMA is built from AnalysisResult, so the two cannot drift.
Wire names are camelCase, Python attributes snake_case.

Dependencies: pydantic, annotated_types, google.genai.types
System role: Structured-output contract for the evaluation pipeline
"""

import base64
from typing import Annotated, Any, get_args, get_origin

import annotated_types
from google.genai import types
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictFloat,
    StrictInt,
    StrictStr,
    computed_field,
)
from pydantic.alias_generators import to_camel


class _ContractModel(BaseModel):
    """Immutable base for everything parsed from the analysis payload.

    Leaf fields use Strict* types so "72" is rejected for an integer instead
    of being repaired.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )


class SwotAnalysis(_ContractModel):
    """Strengths, weaknesses, opportunities and threats of the idea."""

    strengths: list[StrictStr] = Field(description="Internal advantages")
    weaknesses: list[StrictStr] = Field(description="Internal disadvantages")
    opportunities: list[StrictStr] = Field(description="External openings")
    threats: list[StrictStr] = Field(description="External risks")


class Improvements(_ContractModel):
    """Concrete improvements grouped by area."""

    business_plan: list[StrictStr] = Field(description="Business plan improvements")
    marketing: list[StrictStr] = Field(description="Marketing strategy improvements")


class DataPoint(_ContractModel):
    """One named value in a chart series."""

    name: StrictStr = Field(description="Period or category label")
    value: StrictFloat = Field(allow_inf_nan=False, description="Finite numeric value")


class AnalysisResult(_ContractModel):
    """Fully validated evaluation of a business idea.

    Either every field is present and well-typed, or validation fails.
    """

    swot: SwotAnalysis
    risk_assessment: StrictStr = Field(min_length=1, pattern=r"\S")
    strategic_suggestions: list[StrictStr]
    solutions: list[StrictStr]
    improvements: Improvements
    evaluation_score: StrictInt = Field(ge=0, le=100)
    market_trends: list[DataPoint]
    revenue_potential: list[DataPoint]
    market_share: list[DataPoint]
    summary: StrictStr = Field(min_length=1, pattern=r"\S")


class HeroImage(BaseModel):
    """Inline image returned by the image model.

    Raw bytes stay out of serialized output; consumers use ``data_uri``.
    """

    model_config = ConfigDict(frozen=True)

    mime_type: str = Field(default="image/png", description="Declared MIME type")
    data: bytes = Field(exclude=True, repr=False, description="Raw image bytes")

    @computed_field
    @property
    def data_uri(self) -> str:
        """Image encoded for direct display, e.g. ``data:image/png;base64,...``."""
        encoded = base64.b64encode(self.data).decode("utf-8")
        return f"data:{self.mime_type};base64,{encoded}"


_PRIMITIVE_TYPES = {
    str: types.Type.STRING,
    int: types.Type.INTEGER,
    float: types.Type.NUMBER,
}


def _unwrap(annotation: Any) -> tuple[Any, list[Any]]:
    if get_origin(annotation) is Annotated:
        inner, *metadata = get_args(annotation)
        return inner, metadata
    return annotation, []


def _bounds(metadata: list[Any]) -> dict[str, float]:
    bounds: dict[str, float] = {}
    for constraint in metadata:
        if isinstance(constraint, annotated_types.Ge):
            bounds["minimum"] = constraint.ge
        elif isinstance(constraint, annotated_types.Le):
            bounds["maximum"] = constraint.le
    return bounds


def _schema_for_annotation(annotation: Any, metadata: list[Any]) -> types.Schema:
    annotation, inner_metadata = _unwrap(annotation)
    metadata = [*metadata, *inner_metadata]

    if get_origin(annotation) is list:
        (item,) = get_args(annotation)
        return types.Schema(
            type=types.Type.ARRAY,
            items=_schema_for_annotation(item, []),
        )
    if isinstance(annotation, type) and issubclass(annotation, BaseModel):
        return response_schema_for(annotation)
    if annotation not in _PRIMITIVE_TYPES:
        raise TypeError(f"No response schema type for {annotation!r}")
    return types.Schema(type=_PRIMITIVE_TYPES[annotation], **_bounds(metadata))


def response_schema_for(model: type[BaseModel]) -> types.Schema:
    """Build the google.genai response schema for a contract model.

    Properties use the wire aliases and every field is required. Numeric
    ``ge``/``le`` constraints become ``minimum``/``maximum``.

    Args:
        model: Pydantic model whose fields are primitives, lists or models

    Returns:
        types.Schema: OBJECT schema mirroring the model

    Raises:
        TypeError: If a field type has no schema equivalent
    """
    properties = {}
    for name, field in model.model_fields.items():
        alias = field.alias or name
        properties[alias] = _schema_for_annotation(field.annotation, list(field.metadata))
    return types.Schema(
        type=types.Type.OBJECT,
        properties=properties,
        required=list(properties),
    )


ANALYSIS_RESPONSE_SCHEMA = response_schema_for(AnalysisResult)
