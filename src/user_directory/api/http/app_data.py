from dataclasses import dataclass

from src.user_directory.core.services import DbSessionService


@dataclass
class ApplicationDependencies:
    database_service: DbSessionService
