"""
Shop Resource API Routes.

Technician roster, service bays, parts inventory and the service catalog.
"""

from uuid import UUID

from fastapi import APIRouter, HTTPException, status

from ...application.dtos import (
    BayResponse,
    CreateStockItemRequest,
    CreateTechnicianRequest,
    ServiceTaskResponse,
    StockItemResponse,
    TechnicianResponse,
    UpdateStockItemRequest,
)
from ...domain.shared.exceptions import BusinessRuleError, EntityNotFoundError
from ..deps import RepositoryDep, SettingsDep, ShopResourceServiceDep

router = APIRouter(tags=["resources"])


# Technicians


@router.get("/technicians", response_model=list[TechnicianResponse])
def list_technicians(repository: RepositoryDep) -> list[TechnicianResponse]:
    return [TechnicianResponse.from_entity(t) for t in repository.list_technicians()]


@router.post(
    "/technicians",
    response_model=TechnicianResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_technician(
    request: CreateTechnicianRequest,
    service: ShopResourceServiceDep,
    app_settings: SettingsDep,
) -> TechnicianResponse:
    technician = service.add_technician(
        request.to_entity(job_capacity=app_settings.MAX_JOBS_PER_TECHNICIAN)
    )
    return TechnicianResponse.from_entity(technician)


@router.delete(
    "/technicians/{technician_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={
        404: {"description": "Technician not found"},
        409: {"description": "Technician still holds jobs"},
    },
)
def delete_technician(technician_id: UUID, service: ShopResourceServiceDep) -> None:
    try:
        service.remove_technician(technician_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.to_dict())
    except BusinessRuleError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=e.to_dict())


# Service bays


@router.get("/bays", response_model=list[BayResponse])
def list_bays(repository: RepositoryDep) -> list[BayResponse]:
    return [BayResponse.from_entity(b) for b in repository.list_bays()]


# Inventory


@router.get("/inventory", response_model=list[StockItemResponse])
def list_inventory(repository: RepositoryDep) -> list[StockItemResponse]:
    return [StockItemResponse.from_entity(i) for i in repository.list_stock()]


@router.post(
    "/inventory",
    response_model=StockItemResponse,
    status_code=status.HTTP_201_CREATED,
    responses={409: {"description": "Part already stocked"}},
)
def create_stock_item(
    request: CreateStockItemRequest, service: ShopResourceServiceDep
) -> StockItemResponse:
    try:
        item = service.add_stock_item(request.to_entity())
    except BusinessRuleError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=e.to_dict())
    return StockItemResponse.from_entity(item)


@router.put(
    "/inventory/{part_name}",
    response_model=StockItemResponse,
    responses={404: {"description": "Part not stocked"}},
)
def update_stock_item(
    part_name: str, request: UpdateStockItemRequest, service: ShopResourceServiceDep
) -> StockItemResponse:
    try:
        item = service.update_stock_item(
            part_name, quantity=request.quantity, minimum_stock=request.minimum_stock
        )
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.to_dict())
    return StockItemResponse.from_entity(item)


@router.delete(
    "/inventory/{part_name}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={404: {"description": "Part not stocked"}},
)
def delete_stock_item(part_name: str, service: ShopResourceServiceDep) -> None:
    try:
        service.remove_stock_item(part_name)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.to_dict())


@router.post(
    "/inventory/{part_name}/restock",
    response_model=StockItemResponse,
    responses={404: {"description": "Part not stocked"}},
)
def restock_item(part_name: str, service: ShopResourceServiceDep) -> StockItemResponse:
    try:
        item = service.restock(part_name)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.to_dict())
    return StockItemResponse.from_entity(item)


# Service catalog


@router.get("/service-tasks", response_model=list[ServiceTaskResponse])
def list_service_tasks(repository: RepositoryDep) -> list[ServiceTaskResponse]:
    return [ServiceTaskResponse.from_entry(e) for e in repository.list_catalog()]
