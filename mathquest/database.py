from starlette.concurrency import run_in_threadpool
from supabase import create_client, Client
from mathquest.config import Settings
from mathquest.models import SubmissionCreate
from typing import Optional, Dict, Any, Union
import logging

logger = logging.getLogger(__name__)


class DatabaseError(Exception):
    """Raised when a write the caller depends on does not succeed"""


class SupabaseClient:
    """Supabase client wrapper for database operations

    The supabase client is synchronous, so each query runs in the threadpool
    instead of on the event loop.
    """

    def __init__(self, settings: Settings, client: Optional[Client] = None):
        self.settings = settings
        self.client: Client = client or create_client(
            settings.supabase_url,
            settings.supabase_key
        )
        self.sessions_table = settings.sessions_table
        self.submissions_table = settings.submissions_table

    async def test_connection(self) -> bool:
        """Test database connection"""
        try:
            # Simple query to test connection
            await run_in_threadpool(self.client.table(self.sessions_table).select("id").limit(1).execute)
            logger.info("Supabase connection successful")
            return True
        except Exception as e:
            logger.error(f"Supabase connection failed: {e}")
            return False

    # Problem session operations
    async def create_problem_session(self, problem_text: str, final_answer: Union[int, float]) -> Dict[str, Any]:
        """Store a generated problem and return the stored row, including its id"""
        try:
            query = self.client.table(self.sessions_table).insert(
                {"problem_text": problem_text, "final_answer": final_answer}
            )
            result = await run_in_threadpool(query.execute)
        except Exception as e:
            logger.error(f"Error creating problem session: {e}")
            raise DatabaseError(str(e) or "Failed to save problem") from e

        if not result.data:
            logger.error("Problem session insert returned no row")
            raise DatabaseError("Failed to save problem")
        return result.data[0]

    async def get_problem_session(self, session_id: Union[str, int, None]) -> Optional[Dict[str, Any]]:
        """Get problem session by ID"""
        if session_id is None:
            return None
        try:
            query = self.client.table(self.sessions_table).select("*").eq("id", session_id).limit(1)
            result = await run_in_threadpool(query.execute)
            return result.data[0] if result.data else None
        except Exception as e:
            # Malformed ids are rejected by the database; treat them as missing
            logger.error(f"Error getting problem session {session_id}: {e}")
            return None

    # Submission operations
    async def create_submission(self, submission: SubmissionCreate) -> Optional[Dict[str, Any]]:
        """Record an answer attempt"""
        try:
            query = self.client.table(self.submissions_table).insert(submission.model_dump())
            result = await run_in_threadpool(query.execute)
            return result.data[0] if result.data else None
        except Exception as e:
            logger.error(f"Error creating submission for session {submission.session_id}: {e}")
            return None


async def init_db(db: SupabaseClient) -> bool:
    """Initialize database connection"""
    logger.info("Initializing database connection...")
    success = await db.test_connection()
    if success:
        logger.info("Database initialized successfully")
    else:
        logger.error("Database initialization failed")
    return success
