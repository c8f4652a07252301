"""
Request / response models shared by the analysis service, the API and the form.
"""
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator, model_validator


class Medication(BaseModel):
    name: str = Field(..., description="The name of the medication.")
    dosage: str = Field(..., description="The dosage of the medication.")

    @field_validator('name', 'dosage')
    @classmethod
    def strip_and_require(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError('must not be empty')
        return v


class AnalysisRequest(BaseModel):
    medications: List[Medication] = Field(
        default_factory=list,
        description="A list of medications and their dosages."
    )


class AnalysisResult(BaseModel):
    """Outcome of one analysis: exactly one of summary / error is set."""
    summary: Optional[str] = None
    error: Optional[str] = None

    @model_validator(mode='after')
    def exactly_one(self):
        if (self.summary is None) == (self.error is None):
            raise ValueError('exactly one of summary or error must be set')
        return self

    @classmethod
    def success(cls, summary: str) -> "AnalysisResult":
        return cls(summary=summary, error=None)

    @classmethod
    def failure(cls, error: str) -> "AnalysisResult":
        return cls(summary=None, error=error)


class InteractionSummary(BaseModel):
    """Output shape requested from the model."""
    summary: str = Field(
        ...,
        description="A summary of potential drug interactions, side effects, and necessary precautions."
    )
