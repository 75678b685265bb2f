from __future__ import annotations

import logging
import sys
from typing import Callable

from servicecenter.config import Settings
from servicecenter.domain import Client, ServiceCenterError, build_service, check_date
from servicecenter.registry import ServiceCenter

logger = logging.getLogger(__name__)

Prompt = Callable[[str], str]

MENU = (
    "\nVehicle Service Center Management\n"
    "1. Schedule New Appointment\n"
    "2. View Appointments\n"
    "3. Exit\n"
    "4. Advance Appointment Status"
)


def _schedule(center: ServiceCenter, settings: Settings, prompt: Prompt) -> None:
    client_name = prompt("Enter client name: ")
    contact = prompt("Enter contact number: ")
    vehicle_id = prompt("Enter vehicle number: ")
    date = check_date(prompt("Enter appointment date (DD-MM-YYYY): "), strict=settings.strict_dates)
    kind = prompt("Enter service type (oil/engine): ")

    repair_kind = prompt("Enter engine repair type: ") if kind == "engine" else None
    # Raises InvalidServiceType before the registry is touched.
    service = build_service(kind, repair_kind)

    center.schedule(Client(name=client_name, contact=contact), vehicle_id, service, date)
    print("Appointment scheduled successfully!")


def _view(center: ServiceCenter) -> None:
    summaries = center.list()
    if not summaries:
        print("No appointments scheduled.")
        return

    for s in summaries:
        print(
            f"\nVehicle: {s.vehicle_id}"
            f"\nClient: {s.client_name}"
            f"\nService: {s.service_description}"
            f"\nDate: {s.date}"
            f"\nStatus: {s.status}"
        )


def _advance(center: ServiceCenter, prompt: Prompt) -> None:
    vehicle_id = prompt("Enter vehicle number: ")
    date = prompt("Enter appointment date (DD-MM-YYYY): ")
    apt = center.advance(vehicle_id, date)
    print(f"Status is now: {apt.status()}")


def run_menu(center: ServiceCenter, settings: Settings, prompt: Prompt = input) -> int:
    """Drive the interactive menu until the user exits. Returns the exit code."""
    while True:
        print(MENU)
        try:
            option = prompt("Enter your choice: ").strip()
        except EOFError:
            option = "3"

        try:
            if option == "1":
                _schedule(center, settings, prompt)
            elif option == "2":
                _view(center)
            elif option == "3":
                print("Exiting system...")
                return 0
            elif option == "4":
                _advance(center, prompt)
            else:
                print("Invalid option!")
        except ServiceCenterError as e:
            logger.warning("Request rejected (%s: %s)", type(e).__name__, e)
            print(f"Error: {e}", file=sys.stderr)
        except EOFError:
            # Input ended halfway through a prompt sequence.
            print("Exiting system...")
            return 0
