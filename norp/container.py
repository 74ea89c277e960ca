from dependency_injector import containers, providers

from norp.application.commands.parser import CommandParser
from norp.application.session import Session
from norp.application.use_cases.execute_command import CommandExecutor
from norp.infrastructure.config.settings import DEFAULT_CONFIG_PATH, load_settings
from norp.infrastructure.event_bus.local_event_bus import LocalEventBus
from norp.infrastructure.logging.event_handler import LoggingEventHandler
from norp.infrastructure.logging.file_logger import FileLogger
from norp.infrastructure.repositories.json_world_repository import JsonWorldRepository


class Container(containers.DeclarativeContainer):
    """
    The Dependency Injection (DI) container for the application.
    It wires together the different components of the system.
    """
    # =====================================================================
    # Configuration
    # =====================================================================
    # Override with providers.Object(<path>) to read another config file.
    config_path = providers.Object(DEFAULT_CONFIG_PATH)
    settings = providers.Singleton(load_settings, file_path=config_path)

    # =====================================================================
    # Infrastructure Layer
    # =====================================================================
    logger = providers.Singleton(
        FileLogger,
        log_file=settings.provided.log_file,
        level=settings.provided.log_level,
    )
    event_bus = providers.Singleton(LocalEventBus)
    logging_event_handler = providers.Singleton(LoggingEventHandler, logger=logger)
    world_repository = providers.Singleton(JsonWorldRepository)

    # =====================================================================
    # Application Layer
    # =====================================================================
    command_parser = providers.Singleton(CommandParser)
    command_executor = providers.Factory(CommandExecutor, event_bus=event_bus)

    # Factory scope: the run loop creates one Session and passes it along
    # explicitly; the container never holds on to it.
    session = providers.Factory(
        Session,
        settings=settings,
        world_repository=world_repository,
    )


# A global instance of the container
container = Container()
