from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Mapping, Optional

from .auth.repository import RemoteProfileRepository
from .auth.resolver import SessionResolver
from .auth.service import AuthService
from .employees.remote_employee_repository import RemoteEmployeeRepository
from .employees.service import EmployeeService
from .remote.connection import SupabaseConfig, SupabaseConnection
from .remote.gateway import RemoteStoreGateway
from .remote.supabase_gateway import SupabaseGateway
from .tasks.remote_task_repository import RemoteTaskRepository
from .tasks.service import TaskService

GatewayFactory = Callable[[Optional[Mapping[str, str]]], RemoteStoreGateway]


@dataclass(frozen=True)
class Services:
    """Everything wired to one gateway, i.e. to one signed-in user."""

    gateway: RemoteStoreGateway

    profiles_repo: RemoteProfileRepository
    employees_repo: RemoteEmployeeRepository
    tasks_repo: RemoteTaskRepository

    auth_service: AuthService
    employee_service: EmployeeService
    task_service: TaskService

    def session_resolver(self) -> SessionResolver:
        return SessionResolver(self.gateway, self.profiles_repo)


@dataclass(frozen=True)
class Container:
    conn: SupabaseConnection
    gateway_factory: GatewayFactory

    def for_request(self, tokens: Optional[Mapping[str, str]] = None) -> Services:
        return build_services(self.gateway_factory(tokens))


def build_services(gateway: RemoteStoreGateway) -> Services:
    profiles_repo = RemoteProfileRepository(gateway)
    employees_repo = RemoteEmployeeRepository(gateway)
    tasks_repo = RemoteTaskRepository(gateway)

    return Services(
        gateway=gateway,
        profiles_repo=profiles_repo,
        employees_repo=employees_repo,
        tasks_repo=tasks_repo,
        auth_service=AuthService(gateway),
        employee_service=EmployeeService(employees_repo),
        task_service=TaskService(tasks_repo),
    )


def build_container(*, supabase_config: dict, gateway_factory: Optional[GatewayFactory] = None) -> Container:
    config = SupabaseConfig(
        url=str(supabase_config.get("url") or ""),
        anon_key=str(supabase_config.get("anon_key") or ""),
    )
    conn = SupabaseConnection(config)

    if gateway_factory is None:
        def gateway_factory(tokens: Optional[Mapping[str, str]]) -> RemoteStoreGateway:
            return SupabaseGateway(conn, tokens)

    return Container(conn=conn, gateway_factory=gateway_factory)
