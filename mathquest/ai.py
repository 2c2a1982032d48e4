"""
Math Quest - AI Integration Module
Handles problem generation and feedback text using OpenAI chat completions
"""

from mathquest.answers import format_number
from mathquest.config import Settings
from mathquest.models import ProblemParseResult, ProblemSessionCreate
from typing import Any, Optional
import openai
import json
import logging
import math
import re

logger = logging.getLogger(__name__)

INVALID_AI_RESPONSE = "Invalid AI response"

PROBLEM_PROMPT = """Generate a math word problem suitable for a Primary 5 student.
Respond with ONLY valid JSON in this exact shape:
{
  "problem_text": "string",
  "final_answer": number
}"""

FEEDBACK_PROMPT = """The student answered a math problem.
- Correct? {is_correct}
- Student's answer: {user_answer}
- Correct answer: {final_answer}

Please give a short, encouraging feedback (1-2 sentences) suitable for a Primary 5 student."""

_FENCE_RE = re.compile(r"```json\s*|```")


class InvalidAIResponseError(Exception):
    """The model answered, but not with a usable problem"""

    def __init__(self, message: str = INVALID_AI_RESPONSE):
        super().__init__(message)


def strip_code_fences(text: str) -> str:
    """Trim the text and drop markdown fence markers when it starts with one"""
    text = text.strip()
    if text.startswith("```"):
        text = _FENCE_RE.sub("", text).strip()
    return text


def parse_problem_response(text: Optional[str]) -> ProblemParseResult:
    """Parse raw model output into a problem.

    Never raises: the result carries either the problem or the reason it was
    rejected.
    """
    if text is None:
        return ProblemParseResult(ok=False, error="Empty AI response")

    cleaned = strip_code_fences(text)
    try:
        parsed: Any = json.loads(cleaned)
    except ValueError as e:
        # JSONDecodeError, or an integer literal past the int digit limit
        return ProblemParseResult(ok=False, error=f"Malformed JSON: {getattr(e, 'msg', e)}")

    if not isinstance(parsed, dict):
        return ProblemParseResult(ok=False, error="Expected a JSON object")

    problem_text = parsed.get("problem_text")
    final_answer = parsed.get("final_answer")

    if not isinstance(problem_text, str) or not problem_text.strip():
        return ProblemParseResult(ok=False, error="Missing problem_text")
    # bool is an int subclass, but true/false is not an answer
    if isinstance(final_answer, bool) or not isinstance(final_answer, (int, float)):
        return ProblemParseResult(ok=False, error="final_answer must be a number")
    try:
        finite = math.isfinite(final_answer)
    except OverflowError:
        finite = False
    if not finite:
        return ProblemParseResult(ok=False, error="final_answer must be finite")

    return ProblemParseResult(
        ok=True,
        problem=ProblemSessionCreate(problem_text=problem_text, final_answer=final_answer)
    )


class MathQuestAI:
    """OpenAI wrapper producing problems and feedback"""

    def __init__(self, settings: Settings, client: Optional[openai.AsyncOpenAI] = None):
        self.settings = settings
        self.client = client or openai.AsyncOpenAI(
            api_key=settings.openai_api_key,
            timeout=settings.openai_timeout_seconds
        )

    async def generate_problem(self) -> ProblemSessionCreate:
        """Ask the model for a word problem and validate what comes back"""
        response = await self.client.chat.completions.create(
            model=self.settings.problem_model,
            messages=[
                {"role": "system", "content": "Primary school maths teacher. Reply with JSON only, no markdown."},
                {"role": "user", "content": PROBLEM_PROMPT}
            ],
            temperature=self.settings.problem_temperature,
            response_format={"type": "json_object"}
        )
        text = response.choices[0].message.content

        result = parse_problem_response(text)
        if not result.ok:
            logger.error(f"AI did not return a valid problem ({result.error}): {(text or '')[:500]}")
            raise InvalidAIResponseError()

        return result.problem

    async def generate_feedback(self, is_correct: bool, user_answer: float, final_answer: float) -> str:
        """Short encouraging feedback; the model's text is used as-is"""
        prompt = FEEDBACK_PROMPT.format(
            is_correct="true" if is_correct else "false",
            user_answer=format_number(user_answer),
            final_answer=format_number(final_answer)
        )
        response = await self.client.chat.completions.create(
            model=self.settings.feedback_model,
            messages=[
                {"role": "system", "content": "Friendly and encouraging primary school maths tutor."},
                {"role": "user", "content": prompt}
            ],
            temperature=self.settings.feedback_temperature
        )
        return response.choices[0].message.content or ""
