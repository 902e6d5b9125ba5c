"""
Dependency Injection Container.

Configura e gerencia todas as dependências da aplicação.
Usa dependency-injector para lazy-loading e injeção automática.

Padrões:
- Singleton: Uma instância para toda app (store, publisher, auditoria)
- Factory: Nova instância por chamada (services, UoW)
- Object: Colaboradores substituíveis em testes (relógio)
- Dependency: Colaborador externo obrigatório (ChatResponder)

O store é criado uma vez por container e compartilhado por todos os
services; os repositórios são as coleções do próprio store.
"""

from dependency_injector import containers, providers

from solarflow.config.settings import STORE_SETTINGS
from solarflow.core.shared.clock import system_clock
from solarflow.core.accounts import use_cases as accounts
from solarflow.core.accounts.ports import ChatResponder
from solarflow.core.activity import use_cases as activity
from solarflow.core.activity.audit import AuditTrail
from solarflow.core.maintenance import use_cases as maintenance
from solarflow.core.solar import use_cases as solar
from solarflow.core.tickets import use_cases as tickets
from solarflow.adapters.events.publishers import SynchronousEventPublisher
from solarflow.adapters.memory.store import InMemoryStore
from solarflow.adapters.memory.unit_of_work import StoreUnitOfWork


def build_event_publisher(audit_trail: AuditTrail) -> SynchronousEventPublisher:
    """Publisher com a trilha de auditoria já inscrita."""
    publisher = SynchronousEventPublisher()
    audit_trail.subscribe(publisher)
    return publisher


class Container(containers.DeclarativeContainer):
    """
    Container principal de Dependency Injection.

    Organização:
    - Configuration: settings (indicadores e limites)
    - Infrastructure: store, relógio, publisher
    - Unit of Work: Transações
    - Services: Use Cases

    Example:
        from solarflow.config.container import Container

        container = Container()
        service = container.create_ticket_service()
        ticket = service.execute(input_dto)
    """

    # =========================================================================
    # Configuration
    # =========================================================================

    config = providers.Configuration(default=STORE_SETTINGS)

    # =========================================================================
    # Infrastructure
    # =========================================================================

    clock = providers.Object(system_clock)

    store = providers.Singleton(InMemoryStore)

    user_repository = store.provided.users
    ticket_repository = store.provided.tickets
    message_repository = store.provided.messages
    activity_repository = store.provided.activities
    solar_system_repository = store.provided.solar_systems
    booking_repository = store.provided.maintenance_bookings
    report_repository = store.provided.maintenance_reports
    performance_repository = store.provided.performance_data

    audit_trail = providers.Singleton(
        AuditTrail,
        activity_repo=activity_repository,
        clock=clock,
    )

    event_publisher = providers.Singleton(
        build_event_publisher,
        audit_trail=audit_trail,
    )

    chat_responder = providers.Dependency(instance_of=ChatResponder)

    # =========================================================================
    # Unit of Work (Factory - nova instância por operação)
    # =========================================================================

    unit_of_work = providers.Factory(
        StoreUnitOfWork,
        store=store,
        event_publisher=event_publisher,
    )

    # =========================================================================
    # Services: Contas
    # =========================================================================

    create_user_service = providers.Factory(
        accounts.CreateUserService,
        user_repo=user_repository,
        uow=unit_of_work,
        clock=clock,
    )

    get_user_service = providers.Factory(
        accounts.GetUserService,
        user_repo=user_repository,
    )

    get_user_by_username_service = providers.Factory(
        accounts.GetUserByUsernameService,
        user_repo=user_repository,
    )

    create_message_service = providers.Factory(
        accounts.CreateMessageService,
        message_repo=message_repository,
        uow=unit_of_work,
        clock=clock,
    )

    list_messages_service = providers.Factory(
        accounts.ListMessagesService,
        message_repo=message_repository,
    )

    record_chat_exchange_service = providers.Factory(
        accounts.RecordChatExchangeService,
        create_message=create_message_service,
        responder=chat_responder,
    )

    # =========================================================================
    # Services: Tickets
    # =========================================================================

    create_ticket_service = providers.Factory(
        tickets.CreateTicketService,
        ticket_repo=ticket_repository,
        uow=unit_of_work,
        clock=clock,
    )

    update_ticket_service = providers.Factory(
        tickets.UpdateTicketService,
        ticket_repo=ticket_repository,
        uow=unit_of_work,
        clock=clock,
    )

    get_ticket_service = providers.Factory(
        tickets.GetTicketService,
        ticket_repo=ticket_repository,
    )

    list_tickets_service = providers.Factory(
        tickets.ListTicketsService,
        ticket_repo=ticket_repository,
    )

    ticket_stats_service = providers.Factory(
        tickets.TicketStatsService,
        ticket_repo=ticket_repository,
        clock=clock,
        avg_response_time=config.tickets.avg_response_time,
        customer_satisfaction=config.tickets.customer_satisfaction,
    )

    # =========================================================================
    # Services: Atividades
    # =========================================================================

    create_activity_service = providers.Factory(
        activity.CreateActivityService,
        activity_repo=activity_repository,
        uow=unit_of_work,
        clock=clock,
    )

    list_recent_activities_service = providers.Factory(
        activity.ListRecentActivitiesService,
        activity_repo=activity_repository,
        limit=config.activities.recent_limit,
    )

    list_ticket_activities_service = providers.Factory(
        activity.ListTicketActivitiesService,
        activity_repo=activity_repository,
    )

    # =========================================================================
    # Services: Solar
    # =========================================================================

    create_solar_system_service = providers.Factory(
        solar.CreateSolarSystemService,
        system_repo=solar_system_repository,
        uow=unit_of_work,
        clock=clock,
    )

    update_solar_system_service = providers.Factory(
        solar.UpdateSolarSystemService,
        system_repo=solar_system_repository,
        uow=unit_of_work,
    )

    get_solar_system_service = providers.Factory(
        solar.GetSolarSystemService,
        system_repo=solar_system_repository,
    )

    list_solar_systems_service = providers.Factory(
        solar.ListSolarSystemsService,
        system_repo=solar_system_repository,
    )

    record_performance_data_service = providers.Factory(
        solar.RecordPerformanceDataService,
        performance_repo=performance_repository,
        uow=unit_of_work,
        clock=clock,
    )

    get_performance_data_service = providers.Factory(
        solar.GetPerformanceDataService,
        performance_repo=performance_repository,
    )

    list_performance_data_service = providers.Factory(
        solar.ListPerformanceDataService,
        performance_repo=performance_repository,
    )

    system_performance_stats_service = providers.Factory(
        solar.SystemPerformanceStatsService,
        performance_repo=performance_repository,
        clock=clock,
    )

    # =========================================================================
    # Services: Manutenção
    # =========================================================================

    create_maintenance_booking_service = providers.Factory(
        maintenance.CreateMaintenanceBookingService,
        booking_repo=booking_repository,
        uow=unit_of_work,
        clock=clock,
    )

    update_maintenance_booking_service = providers.Factory(
        maintenance.UpdateMaintenanceBookingService,
        booking_repo=booking_repository,
        uow=unit_of_work,
        clock=clock,
    )

    get_maintenance_booking_service = providers.Factory(
        maintenance.GetMaintenanceBookingService,
        booking_repo=booking_repository,
    )

    list_maintenance_bookings_service = providers.Factory(
        maintenance.ListMaintenanceBookingsService,
        booking_repo=booking_repository,
    )

    create_maintenance_report_service = providers.Factory(
        maintenance.CreateMaintenanceReportService,
        report_repo=report_repository,
        booking_repo=booking_repository,
        system_repo=solar_system_repository,
        uow=unit_of_work,
        clock=clock,
    )

    get_maintenance_report_service = providers.Factory(
        maintenance.GetMaintenanceReportService,
        report_repo=report_repository,
    )

    list_maintenance_reports_service = providers.Factory(
        maintenance.ListMaintenanceReportsService,
        report_repo=report_repository,
    )

    maintenance_stats_service = providers.Factory(
        maintenance.MaintenanceStatsService,
        booking_repo=booking_repository,
        clock=clock,
        average_rating=config.maintenance.average_rating,
        upcoming_limit=config.maintenance.upcoming_limit,
    )
