from dependency_injector import containers, providers
from sqlalchemy.orm import Session

from lang_portal.application.study.use_cases.session_recorder_use_case import (
    SessionRecorderUseCase,
)
from lang_portal.application.study.use_cases.study_analytics_use_case import (
    StudyAnalyticsUseCase,
)
from lang_portal.application.study.use_cases.study_session_query_use_case import (
    StudySessionQueryUseCase,
)
from lang_portal.application.vocabulary.use_cases.group_query_use_case import GroupQueryUseCase
from lang_portal.application.vocabulary.use_cases.word_query_use_case import WordQueryUseCase
from lang_portal.config import Settings, configure_logging, get_settings
from lang_portal.database import Database
from lang_portal.domain.study.services import StudyStreakCalculator
from lang_portal.infrastructure.common.unit_of_work import SqlAlchemyUnitOfWork
from lang_portal.infrastructure.study.activity_catalog import StaticStudyActivityCatalog
from lang_portal.infrastructure.study.repositories import (
    StudyAnalyticsRepository,
    StudySessionRepository,
    WordReviewRepository,
)
from lang_portal.infrastructure.vocabulary.repositories import GroupRepository, WordRepository
from lang_portal.utils import utc_now


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    # Declare db as a dependency that will be provided at runtime
    db = providers.Dependency(instance_of=Session)

    settings = providers.Singleton(get_settings)
    clock = providers.Object(utc_now)

    # Static catalog, built once from settings
    activity_catalog = providers.Singleton(
        StaticStudyActivityCatalog.from_settings, settings=settings
    )

    # Repositories
    word_repository = providers.Factory(WordRepository, db=db)
    group_repository = providers.Factory(GroupRepository, db=db)
    study_session_repository = providers.Factory(StudySessionRepository, db=db)
    word_review_repository = providers.Factory(WordReviewRepository, db=db)
    study_analytics_repository = providers.Factory(StudyAnalyticsRepository, db=db)
    unit_of_work = providers.Factory(SqlAlchemyUnitOfWork, db=db)

    # Domain services (pure domain logic, no db)
    study_streak_calculator = providers.Factory(StudyStreakCalculator)

    # Vocabulary module, application use cases
    word_query_use_case = providers.Factory(
        WordQueryUseCase,
        word_repository=word_repository,
        group_repository=group_repository,
    )
    group_query_use_case = providers.Factory(
        GroupQueryUseCase,
        group_repository=group_repository,
        word_repository=word_repository,
        session_repository=study_session_repository,
        activity_catalog=activity_catalog,
    )

    # Study module, application use cases
    study_session_query_use_case = providers.Factory(
        StudySessionQueryUseCase,
        session_repository=study_session_repository,
        word_repository=word_repository,
        activity_catalog=activity_catalog,
    )
    session_recorder_use_case = providers.Factory(
        SessionRecorderUseCase,
        uow=unit_of_work,
        group_repository=group_repository,
        word_repository=word_repository,
        session_repository=study_session_repository,
        review_repository=word_review_repository,
        activity_catalog=activity_catalog,
    )
    study_analytics_use_case = providers.Factory(
        StudyAnalyticsUseCase,
        analytics_repository=study_analytics_repository,
        session_repository=study_session_repository,
        activity_catalog=activity_catalog,
        streak_calculator=study_streak_calculator,
        clock=clock,
        active_group_window_days=settings.provided.ACTIVE_GROUP_WINDOW_DAYS,
    )


container = Container()


def create_database(settings: Settings | None = None) -> Database:
    """
    Bootstrap the entity store: configure logging, open the engine and
    make sure the tables exist.
    """
    settings = settings or get_settings()
    configure_logging(settings.ENVIRONMENT)
    database = Database(settings)
    database.create_tables()
    return database
