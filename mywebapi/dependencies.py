from typing import cast

from dependency_injector.containers import DeclarativeContainer
from dependency_injector.providers import Configuration, Singleton

from mywebapi.applications.api.controllers import ControllerRegistry
from mywebapi.repos.users import UsersRepo
from mywebapi.services.endpoint_explorer import EndpointExplorer
from mywebapi.services.schema_generator import SchemaGenerator
from mywebapi.services.user_service import UserService
from mywebapi.settings import Settings


class Container(DeclarativeContainer):
    config = Configuration()
    config.from_pydantic(Settings())  # type: ignore
    config = cast(Settings, config)  # type: ignore[assignment]

    users_repo = Singleton(
        UsersRepo,
        filepath=config.api_users_file,
    )

    # Services
    user_service = Singleton(
        UserService,
        users_repo=users_repo,
        hash_iterations=config.password_hash_iterations,
    )

    # API
    controller_registry = Singleton(ControllerRegistry)
    endpoint_explorer = Singleton(EndpointExplorer)
    schema_generator = Singleton(
        SchemaGenerator,
        title=config.app_title,
        version=config.app_version,
        description=config.app_description,
        document_name=config.api_document_name,
    )
