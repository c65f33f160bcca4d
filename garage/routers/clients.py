"""Client directory: register, list and look up."""

from fastapi import APIRouter, Depends, HTTPException
from garage.models.client import Client
from garage.models.facility import Facility
from garage.schemas.client import ClientCreate, ClientOut, ClientSummaryOut
from garage.services.client_service import get_client, list_clients, register_client
from garage.services.errors import DuplicateClientId
from garage.state import get_facility

router = APIRouter()


@router.get("/clients", response_model=list[ClientSummaryOut], summary="List clients in registration order")
def get_clients(facility: Facility = Depends(get_facility)):
    return [ClientSummaryOut.model_validate(c) for c in list_clients(facility)]


@router.post("/clients", response_model=ClientOut, status_code=201, summary="Register a new client")
def create_client(body: ClientCreate, facility: Facility = Depends(get_facility)):
    try:
        client = register_client(facility, Client(**body.model_dump()))
    except DuplicateClientId as e:
        raise HTTPException(status_code=400, detail=str(e))
    return ClientOut.model_validate(client)


@router.get("/clients/{client_id}", response_model=ClientOut, summary="Look up a client")
def get_one_client(client_id: int, facility: Facility = Depends(get_facility)):
    client = get_client(facility, client_id)
    if not client:
        raise HTTPException(status_code=404, detail="Client not found")
    return ClientOut.model_validate(client)
