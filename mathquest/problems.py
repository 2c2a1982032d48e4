"""
Math Quest - Problem Generation Module
Asks the AI for a new word problem and stores it as a problem session
"""

from fastapi import APIRouter, Depends, HTTPException, status
from mathquest.ai import MathQuestAI
from mathquest.database import SupabaseClient
from mathquest.dependencies import get_ai, get_db
from mathquest.models import ErrorResponse, ProblemSession
import logging

logger = logging.getLogger(__name__)

# Router setup
problems_router = APIRouter()


def error_message(error: Exception) -> str:
    """Message shown to the page; exceptions without text read as 'Unknown error'"""
    return str(error) or "Unknown error"


@problems_router.post(
    "/generate-problem",
    response_model=ProblemSession,
    responses={500: {"model": ErrorResponse}},
    tags=["Problems"]
)
async def generate_problem(
    ai: MathQuestAI = Depends(get_ai),
    db: SupabaseClient = Depends(get_db)
):
    """Generate a Primary 5 word problem and store it

    Returns the stored session, including the id used to submit answers.
    Nothing is stored when the AI output is unusable.
    """
    try:
        problem = await ai.generate_problem()
        session = await db.create_problem_session(problem.problem_text, problem.final_answer)
        logger.info(f"Created problem session {session.get('id')}")
        return ProblemSession(**session)

    except Exception as e:
        logger.error(f"Problem generation error: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=error_message(e)
        )
