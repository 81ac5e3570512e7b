"""
Work Order API Routes.

Intake, progress reporting and completion of vehicle service work orders,
plus the completed-receipt history.
"""

from fastapi import APIRouter, HTTPException, status

from ...application.dtos import (
    CompleteWorkOrderResponse,
    ProgressUpdateRequest,
    ReceiptResponse,
    ServiceRequest,
    WorkOrderCreatedResponse,
    WorkOrderResponse,
)
from ...domain.shared.exceptions import (
    BusinessRuleError,
    EntityNotFoundError,
    ValidationError,
)
from ..deps import WorkOrderServiceDep

router = APIRouter(tags=["work-orders"])


@router.post(
    "/work-orders",
    summary="Create work order",
    description="Estimate, allocate technicians and a bay, and schedule a service request.",
    response_model=WorkOrderCreatedResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"description": "None of the selected tasks are in the catalog"},
    },
)
def create_work_order(
    request: ServiceRequest, service: WorkOrderServiceDep
) -> WorkOrderCreatedResponse:
    """
    Create a work order from a service request.

    Capacity shortages do not fail the request: the order is queued or
    degraded and the response carries warnings.
    """
    try:
        result = service.create_work_order(request.to_intake())
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.to_dict())
    return WorkOrderCreatedResponse.from_result(result)


@router.get(
    "/work-orders",
    summary="List live work orders",
    response_model=list[WorkOrderResponse],
)
def list_work_orders(service: WorkOrderServiceDep) -> list[WorkOrderResponse]:
    return [WorkOrderResponse.from_entity(o) for o in service.list_work_orders()]


@router.patch(
    "/work-orders/{order_id}/progress",
    summary="Report work order progress",
    response_model=WorkOrderResponse,
    responses={
        404: {"description": "Work order not found"},
        409: {"description": "Work order already completed"},
    },
)
def update_progress(
    order_id: str, request: ProgressUpdateRequest, service: WorkOrderServiceDep
) -> WorkOrderResponse:
    try:
        order = service.update_progress(order_id, request.progress)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.to_dict())
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.to_dict())
    except BusinessRuleError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=e.to_dict())
    return WorkOrderResponse.from_entity(order)


@router.post(
    "/work-orders/{order_id}/complete",
    summary="Complete work order",
    description="Release the order's technicians and bay and record a receipt.",
    response_model=CompleteWorkOrderResponse,
    responses={404: {"description": "Work order not found or already completed"}},
)
def complete_work_order(
    order_id: str, service: WorkOrderServiceDep
) -> CompleteWorkOrderResponse:
    try:
        receipt = service.complete_work_order(order_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.to_dict())
    return CompleteWorkOrderResponse(
        success=True, receipt=ReceiptResponse.from_receipt(receipt)
    )


@router.get(
    "/receipts",
    summary="List completed work order receipts",
    response_model=list[ReceiptResponse],
)
def list_receipts(service: WorkOrderServiceDep) -> list[ReceiptResponse]:
    return [ReceiptResponse.from_receipt(r) for r in service.list_receipts()]
