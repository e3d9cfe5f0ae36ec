from fastapi import Request

from ..database.base_repo import BaseRepository
from ..database.mongo_repo import MongoRepository
from ..config import app_config


def create_repo() -> "BaseRepository":
    """Build the process wide repository. Called once, by the application entry point."""
    return MongoRepository(db_name = app_config.DB_NAME)

def get_repo(request: Request) -> "BaseRepository":
    """Route dependency returning the repository the app was created with."""
    return request.app.state.repo
