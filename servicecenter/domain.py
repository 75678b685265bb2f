from __future__ import annotations

import datetime as dt
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Union

DATE_FORMAT = "%d-%m-%Y"  # DD-MM-YYYY

Notify = Callable[[str], None]


class ServiceCenterError(RuntimeError):
    """Recoverable error: the console reports it and shows the menu again."""


class SchedulingConflict(ServiceCenterError):
    def __init__(self, vehicle_id: str, date: str):
        super().__init__("Scheduling conflict: Vehicle already has an appointment on this date")
        self.vehicle_id = vehicle_id
        self.date = date


class InvalidServiceType(ServiceCenterError):
    def __init__(self, kind: str):
        super().__init__(f"Invalid service type: {kind!r}")
        self.kind = kind


class InvalidDate(ServiceCenterError):
    pass


class AppointmentNotFound(ServiceCenterError):
    pass


@dataclass(frozen=True)
class Client:
    name: str
    contact: str

    def notify(self, message: str) -> None:
        print(f"Notification for {self.name}: {message}")


@dataclass(frozen=True)
class OilChange:
    service_type: str = "Oil Change"
    base_cost: float = 50.0
    parts: tuple[str, ...] = ("Oil Filter", "Engine Oil")

    def cost(self) -> float:
        return self.base_cost

    def description(self) -> str:
        return "Standard Oil Change Service"


@dataclass(frozen=True)
class EngineRepair:
    repair_kind: str
    service_type: str = "Engine Repair"
    base_cost: float = 200.0
    parts: tuple[str, ...] = ("Engine Parts", "Lubricants")

    def cost(self) -> float:
        return self.base_cost * 1.5

    def description(self) -> str:
        return f"Engine Repair: {self.repair_kind}"


Service = Union[OilChange, EngineRepair]


def build_service(kind: str, repair_kind: str | None = None) -> Service:
    """Map menu input ("oil" / "engine") to a service variant.

    Matching is exact; "Oil" or " oil" are rejected like any other value.
    """
    if kind == "oil":
        return OilChange()
    if kind == "engine":
        return EngineRepair(repair_kind=repair_kind or "")
    raise InvalidServiceType(kind)


def check_date(raw: str, *, strict: bool) -> str:
    # Dates are kept as the user typed them; strict mode only rejects bad input.
    if strict:
        try:
            dt.datetime.strptime(raw, DATE_FORMAT)
        except ValueError as e:
            raise InvalidDate(f"Invalid date: {raw!r}. Expected DD-MM-YYYY.") from e
    return raw


class AppointmentState(Enum):
    SCHEDULED = "Scheduled"
    IN_PROGRESS = "In Progress"
    COMPLETED = "Completed"

    @property
    def label(self) -> str:
        return self.value

    def next(self) -> AppointmentState:
        if self is AppointmentState.SCHEDULED:
            return AppointmentState.IN_PROGRESS
        # IN_PROGRESS -> COMPLETED, COMPLETED is terminal
        return AppointmentState.COMPLETED


@dataclass
class Appointment:
    client: Client
    vehicle_id: str
    service: Service
    date: str
    state: AppointmentState = AppointmentState.SCHEDULED

    def advance(self) -> AppointmentState:
        self.state = self.state.next()
        return self.state

    def status(self) -> str:
        return self.state.label

    def matches(self, vehicle_id: str, date: str) -> bool:
        return self.vehicle_id == vehicle_id and self.date == date


@dataclass(frozen=True)
class AppointmentSummary:
    vehicle_id: str
    client_name: str
    service_description: str
    date: str
    status: str
