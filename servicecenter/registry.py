from __future__ import annotations

import logging
import threading

from servicecenter.domain import (
    Appointment,
    AppointmentNotFound,
    AppointmentSummary,
    Client,
    Notify,
    SchedulingConflict,
    Service,
)

logger = logging.getLogger(__name__)


class ServiceCenter:
    """Insertion-ordered appointment registry.

    At most one appointment per (vehicle_id, date). One lock guards the
    sequence so schedule/list/advance are atomic with respect to each other.
    """

    def __init__(self) -> None:
        self._appointments: list[Appointment] = []
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._appointments)

    def _find(self, vehicle_id: str, date: str) -> Appointment | None:
        for apt in self._appointments:
            if apt.matches(vehicle_id, date):
                return apt
        return None

    def find(self, vehicle_id: str, date: str) -> Appointment | None:
        with self._lock:
            return self._find(vehicle_id, date)

    def schedule(
        self,
        client: Client,
        vehicle_id: str,
        service: Service,
        date: str,
        notify: Notify | None = None,
    ) -> Appointment:
        with self._lock:
            if self._find(vehicle_id, date) is not None:
                logger.warning("Conflict: vehicle=%s already booked on %s", vehicle_id, date)
                raise SchedulingConflict(vehicle_id, date)

            appointment = Appointment(client=client, vehicle_id=vehicle_id, service=service, date=date)
            self._appointments.append(appointment)

        logger.info(
            "Scheduled vehicle=%s date=%s service=%r client=%s",
            vehicle_id,
            date,
            service.description(),
            client.name,
        )

        message = f"Appointment scheduled for {date}"
        (notify or client.notify)(message)
        logger.info("Notified %s: %s", client.name, message)
        return appointment

    def list(self) -> list[AppointmentSummary]:
        with self._lock:
            return [
                AppointmentSummary(
                    vehicle_id=apt.vehicle_id,
                    client_name=apt.client.name,
                    service_description=apt.service.description(),
                    date=apt.date,
                    status=apt.status(),
                )
                for apt in self._appointments
            ]

    def advance(self, vehicle_id: str, date: str) -> Appointment:
        with self._lock:
            apt = self._find(vehicle_id, date)
            if apt is None:
                raise AppointmentNotFound(f"No appointment for vehicle {vehicle_id} on {date}")
            before = apt.status()
            apt.advance()

        logger.info("Vehicle=%s date=%s: %s -> %s", vehicle_id, date, before, apt.status())
        return apt
