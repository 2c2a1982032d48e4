"""
Math Quest - Shared Clients
Clients are built once at startup, kept on the application state and handed
to endpoints through FastAPI dependencies
"""

from fastapi import FastAPI, Request
from mathquest.ai import MathQuestAI
from mathquest.config import Settings
from mathquest.database import SupabaseClient


def init_clients(app: FastAPI, settings: Settings) -> None:
    """Construct the datastore and AI clients for the lifetime of the process"""
    app.state.db = SupabaseClient(settings)
    app.state.ai = MathQuestAI(settings)


def get_db(request: Request) -> SupabaseClient:
    """Dependency to get the datastore client"""
    return request.app.state.db


def get_ai(request: Request) -> MathQuestAI:
    """Dependency to get the AI client"""
    return request.app.state.ai
