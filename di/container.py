"""Centralized dependency injection container."""
from __future__ import annotations

from dependency_injector import containers, providers

from core.settings import SETTINGS
from infra.resources import DatabaseResource


class InfrastructureContainer(containers.DeclarativeContainer):
    """Infrastructure layer dependencies."""

    settings = providers.Object(SETTINGS)

    # Database
    database = providers.Resource(
        DatabaseResource,
        database_url=str(SETTINGS.DATABASE.DATABASE_URL),
        echo=SETTINGS.DATABASE.DATABASE_ECHO,
    )


class ServiceContainer(containers.DeclarativeContainer):
    """Application services - depends on infrastructure."""

    infrastructure = providers.DependenciesContainer()

    # Services
    conversation_service = providers.Factory(
        "api.features.conversation.service.ConversationService",
    )


class ControllerContainer(containers.DeclarativeContainer):
    """Controller-specific dependencies."""

    services = providers.DependenciesContainer()

    # Controllers
    conversation_controller = providers.Factory(
        "api.features.conversation.controller.ConversationController",
        conversation_service=services.conversation_service,
    )


class ApplicationContainer(containers.DeclarativeContainer):
    """Main application container composing all sub-containers."""

    wiring_config = containers.WiringConfiguration(
        modules=[
            "api.shared.db",
            "api.features.conversation.router",
        ]
    )

    infrastructure = providers.Container(InfrastructureContainer)
    services = providers.Container(ServiceContainer, infrastructure=infrastructure)
    controllers = providers.Container(ControllerContainer, services=services)
