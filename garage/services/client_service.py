# garage/services/client_service.py
"""Client directory: registration and lookup. There is no delete."""

from typing import List, Optional

from garage.models.client import Client
from garage.models.facility import Facility
from garage.services.errors import DuplicateClientId
from garage.utils.logger import get_logger

logger = get_logger(__name__)


def register_client(facility: Facility, client: Client) -> Client:
    """Store a new client. An existing id is refused, never overwritten."""
    with facility.lock:
        if client.id in facility.clients:
            raise DuplicateClientId(client.id)
        facility.clients[client.id] = client
    logger.info(f"Client {client.name} registered (id={client.id}, kind={client.kind.value})")
    return client


def get_client(facility: Facility, client_id: int) -> Optional[Client]:
    return facility.clients.get(client_id)


def list_clients(facility: Facility) -> List[Client]:
    """All clients in registration order."""
    return list(facility.clients.values())
