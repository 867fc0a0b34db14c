"""
Result shapes returned by the career operations.

Each operation returns exactly one of its success models or a FailureResult.
"""
from typing import Any, Dict, List, Literal, Union

from pydantic import BaseModel


class FailureResult(BaseModel):
    """Uniform failure body; returned with HTTP 200"""
    success: Literal[False] = False
    error: str
    details: str


class RecommendationsResult(BaseModel):
    success: Literal[True] = True
    recommendations: List[Dict[str, Any]]


class CareersResult(BaseModel):
    success: Literal[True] = True
    careers: List[Dict[str, Any]]


class SkillsResult(BaseModel):
    success: Literal[True] = True
    skills: List[Dict[str, Any]]


class InvalidArgumentDetail(BaseModel):
    """Body of the HTTP 400 raised for caller faults"""
    code: str
    message: str


RecommendationsResponse = Union[RecommendationsResult, FailureResult]
CareersResponse = Union[CareersResult, FailureResult]
SkillsResponse = Union[SkillsResult, FailureResult]
