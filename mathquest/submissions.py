"""
Math Quest - Answer Submission Module
Checks a submitted answer, asks the AI for feedback and records the attempt
"""

from fastapi import APIRouter, Depends, HTTPException, status
from mathquest.ai import MathQuestAI
from mathquest.answers import coerce_answer, is_correct_answer, storable_answer
from mathquest.database import SupabaseClient
from mathquest.dependencies import get_ai, get_db
from mathquest.models import (
    AnswerSubmissionRequest,
    AnswerSubmissionResponse,
    ErrorResponse,
    SubmissionCreate
)
from mathquest.problems import error_message
import logging

logger = logging.getLogger(__name__)

# Router setup
submissions_router = APIRouter()


@submissions_router.post(
    "/submit-answer",
    response_model=AnswerSubmissionResponse,
    responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    tags=["Submissions"]
)
async def submit_answer(
    request: AnswerSubmissionRequest,
    ai: MathQuestAI = Depends(get_ai),
    db: SupabaseClient = Depends(get_db)
):
    """Mark an answer and return encouraging feedback

    The correct answer is returned whether or not the student got it right.
    """
    session = await db.get_problem_session(request.session_id)
    if not session:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Session not found"
        )

    try:
        final_answer = session["final_answer"]
        user_answer = coerce_answer(request.user_answer)
        is_correct = is_correct_answer(request.user_answer, final_answer)

        feedback = await ai.generate_feedback(is_correct, user_answer, coerce_answer(final_answer))

        # Best effort; insert failures are logged and the response still goes out
        saved = await db.create_submission(SubmissionCreate(
            session_id=request.session_id,
            user_answer=storable_answer(user_answer),
            is_correct=is_correct,
            feedback=feedback
        ))
        if saved is None:
            logger.warning(f"Submission for session {request.session_id} was not saved")

        return AnswerSubmissionResponse(
            feedback=feedback,
            is_correct=is_correct,
            final_answer=final_answer
        )

    except Exception as e:
        logger.error(f"submit-answer error: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=error_message(e)
        )
