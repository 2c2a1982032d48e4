"""
Math Quest - Shared Models and Schemas
Pydantic models for data validation and serialization
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Optional, Union


Number = Union[int, float]


# Problem Session Models
class ProblemSessionCreate(BaseModel):
    """Problem as produced by the AI, before it is stored"""
    problem_text: str = Field(..., min_length=1)
    final_answer: Number


class ProblemSession(ProblemSessionCreate):
    """Stored problem session"""
    id: Union[str, int]

    model_config = ConfigDict(from_attributes=True)


class ProblemParseResult(BaseModel):
    """Outcome of parsing raw model output into a problem"""
    ok: bool
    problem: Optional[ProblemSessionCreate] = None
    error: Optional[str] = None


# Submission Models
class AnswerSubmissionRequest(BaseModel):
    """Answer posted by the page"""
    session_id: Optional[Union[str, int]] = Field(None, alias="sessionId")
    user_answer: Any = Field(None, alias="userAnswer")

    model_config = ConfigDict(populate_by_name=True)


class AnswerSubmissionResponse(BaseModel):
    """Feedback returned for an answer"""
    feedback: str
    is_correct: bool = Field(..., alias="isCorrect")
    final_answer: Number = Field(..., alias="finalAnswer")

    model_config = ConfigDict(populate_by_name=True)


class SubmissionCreate(BaseModel):
    """Submission row written for every answered problem"""
    session_id: Union[str, int]
    user_answer: Optional[float] = None  # None when the answer was not a number
    is_correct: bool
    feedback: str


class ErrorResponse(BaseModel):
    """Error body shared by every endpoint"""
    error: str
