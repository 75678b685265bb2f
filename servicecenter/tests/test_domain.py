from __future__ import annotations

import pytest

from servicecenter.domain import (
    Appointment,
    AppointmentState,
    Client,
    EngineRepair,
    InvalidDate,
    InvalidServiceType,
    OilChange,
    build_service,
    check_date,
)


def _appointment() -> Appointment:
    return Appointment(client=Client("Alice", "555"), vehicle_id="KA01", service=OilChange(), date="01-01-2025")


def test_new_appointment_is_scheduled() -> None:
    assert _appointment().status() == "Scheduled"


def test_advance_walks_lifecycle_and_stops_at_completed() -> None:
    apt = _appointment()

    assert apt.advance() is AppointmentState.IN_PROGRESS
    assert apt.status() == "In Progress"
    apt.advance()
    apt.advance()
    assert apt.status() == "Completed"

    # Terminal state: further advances are no-ops.
    apt.advance()
    assert apt.state is AppointmentState.COMPLETED


def test_oil_change_cost_and_parts() -> None:
    oil = OilChange()
    assert oil.cost() == 50.0
    assert oil.description() == "Standard Oil Change Service"
    assert oil.parts == ("Oil Filter", "Engine Oil")


@pytest.mark.parametrize("kind", ["piston rings", "", "Timing belt / 2nd visit"])
def test_engine_repair_cost_is_one_and_a_half_base(kind: str) -> None:
    repair = EngineRepair(kind)
    assert repair.cost() == 300.0
    assert kind in repair.description()
    assert repair.description().startswith("Engine Repair: ")


def test_build_service_maps_menu_input() -> None:
    assert build_service("oil") == OilChange()
    assert build_service("engine", "gasket") == EngineRepair("gasket")


@pytest.mark.parametrize("kind", ["bike", "Oil", " oil", ""])
def test_build_service_rejects_unknown_kind(kind: str) -> None:
    with pytest.raises(InvalidServiceType, match="Invalid service type"):
        build_service(kind)


def test_client_notify_prints(capsys: pytest.CaptureFixture[str]) -> None:
    Client("Alice", "555").notify("hello")
    assert capsys.readouterr().out == "Notification for Alice: hello\n"


def test_check_date_is_lenient_by_default() -> None:
    assert check_date("tomorrow", strict=False) == "tomorrow"


def test_check_date_strict_mode() -> None:
    assert check_date("31-12-2025", strict=True) == "31-12-2025"
    with pytest.raises(InvalidDate, match="DD-MM-YYYY"):
        check_date("2025-12-31", strict=True)
