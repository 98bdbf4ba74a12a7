"""Synthetic client generator for non-production seeding.

Builds plausible Colombian client records from fixed pools and inserts
them one by one through ``ClientService``.  Generation is fail-fast: the
first failed insert propagates and the remaining records are skipped.
Document numbers are drawn at random and may collide; the database's
unique constraint decides what happens then.
"""

from __future__ import annotations

import random
from typing import TYPE_CHECKING, Optional

import structlog

from modules.clients.dtos import ClientDTO

if TYPE_CHECKING:
    from modules.clients.services import ClientService

logger = structlog.get_logger(__name__)

# Cédula / Pasaporte
DOCUMENT_TYPES = ("C", "P")

DOCUMENT_NUMBER_MIN = 10_000_000
DOCUMENT_NUMBER_MAX = 99_999_999

PHONE_PREFIX_MIN = 300
PHONE_PREFIX_MAX = 399
PHONE_SUFFIX_MAX = 9_999_999

FIRST_NAMES = (
    "Sofía", "Valentina", "Isabella", "Camila", "María", "Lucía", "Martina",
    "Emma", "Daniela", "Sara", "Juan", "Sebastián", "Mateo", "Santiago",
    "Samuel", "Gabriel", "Alejandro", "David", "Lucas", "Nicolás", "Laura",
    "Paula", "Andrea", "Juliana", "Carolina", "Diego", "Carlos", "Julián",
    "Andrés", "Victoria", "Mariana", "Natalia", "Mónica", "Gabriela", "Ana",
    "Camilo", "José", "Fernando", "Ricardo", "Manuela", "Emilia", "Martín",
    "Simón", "Thiago", "Javier", "Felipe", "Renata", "Adrián", "Mario",
    "Tomás", "Bruno", "Miguel", "Alejandra", "Claudia", "Angela", "Patricia",
    "Luis", "Antonio", "Jorge", "Héctor", "Diana", "Carla", "Lorena",
    "Esteban", "Juan Pablo", "José Miguel",
)

LAST_NAMES = (
    "Gómez", "Rodríguez", "López", "Martínez", "Pérez", "García", "Sánchez",
    "Ramírez", "Torres", "Flores", "Rojas", "Morales", "Cruz", "Vásquez",
    "Castillo", "Alvarez", "Mendoza", "Gutiérrez", "Ortiz", "Silva",
    "González", "Jiménez", "Hernández", "Chávez", "Romero", "Suárez", "Bravo",
    "Paredes", "Salazar", "Córdoba", "Castro", "Acosta", "Herrera", "Rincón",
    "Agudelo", "Díaz", "Soto", "Cabrera", "Peña", "Navarro", "Ospina", "Mejía",
    "Arias", "Velásquez", "Cano", "Montoya", "Quintero", "Medina", "Reyes",
    "Restrepo",
)

CITIES = (
    "Bogotá", "Medellín", "Cali", "Barranquilla", "Cartagena", "Cúcuta",
    "Bucaramanga", "Pereira", "Santa Marta", "Ibagué",
)


class ClientGenerator:
    """Generates random clients and persists them via ``ClientService``.

    ``rng`` defaults to an unseeded ``random.Random``; pass a seeded one
    for reproducible output.
    """

    def __init__(
        self, service: ClientService, rng: Optional[random.Random] = None
    ) -> None:
        self._service = service
        self._rng = rng if rng is not None else random.Random()

    def build_client(self) -> ClientDTO:
        """Draw one client; every field is drawn independently."""
        rng = self._rng
        phone = (
            f"{rng.randint(PHONE_PREFIX_MIN, PHONE_PREFIX_MAX):03d}"
            f"-{rng.randint(0, PHONE_SUFFIX_MAX):07d}"
        )
        address = (
            f"Calle {rng.randint(1, 150)} # {rng.randint(1, 100)}-{rng.randint(1, 50)}"
        )
        return ClientDTO(
            document_type=rng.choice(DOCUMENT_TYPES),
            document_number=rng.randint(DOCUMENT_NUMBER_MIN, DOCUMENT_NUMBER_MAX),
            first_name=rng.choice(FIRST_NAMES),
            middle_name=rng.choice(FIRST_NAMES),
            last_name=rng.choice(LAST_NAMES),
            second_last_name=rng.choice(LAST_NAMES),
            phone=phone,
            address=address,
            city=rng.choice(CITIES),
        )

    def generate(self, count: int) -> int:
        """Create ``count`` clients and return how many were inserted.

        A non-positive ``count`` creates nothing.  The first failing insert
        aborts the run and propagates.
        """
        log = logger.bind(count=count)
        log.info("generator.started")
        created = 0
        for _ in range(count):
            self._service.create_client(self.build_client())
            created += 1
        log.info("generator.completed", created=created)
        return created
