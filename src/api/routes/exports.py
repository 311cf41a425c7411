"""Export API Routes

Endpoints for exporting a project as a JSON report, polling the export
and downloading the finished file.
"""
from typing import List
from fastapi import APIRouter, Depends, Response, status
from src.api.error import raise_for_error
from src.api.schemas.response import ApiResponse
from src.app.services.export_dispatcher import ExportDispatcher
from src.app.services.file_storage import FileStorage
from src.app.services.unit_of_work import UnitOfWork
from src.depends import (
    get_current_user,
    get_export_dispatcher,
    get_file_storage,
    get_unit_of_work,
)
from src.app.use_cases.exports import (
    CreateExportUseCase,
    CreateExportResponseDTO,
    DownloadExportUseCase,
    ExportStatusDTO,
    GetExportStatusUseCase,
    ListUserExportsUseCase,
)
from config import ApplicationConfig

router = APIRouter()

DOWNLOAD_BASE = f"{ApplicationConfig.API_PREFIX}/exports"


@router.post(
    "/projects/{project_id}/export",
    response_model=ApiResponse[CreateExportResponseDTO],
    status_code=status.HTTP_202_ACCEPTED,
)
async def create_export(
    project_id: str,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
    dispatcher: ExportDispatcher = Depends(get_export_dispatcher),
):
    """
    Request an export of a project

    Queued when Redis is reachable (poll the status endpoint), otherwise
    generated before this request returns.
    """
    user_id = current_user["user_id"]
    result = await CreateExportUseCase(uow).execute(project_id=project_id, user_id=user_id)

    if result.is_err():
        raise_for_error(result.error)

    export = result.value
    dispatched = await dispatcher.dispatch(export.id, project_id, user_id)

    if dispatched.is_err():
        raise_for_error(dispatched.error)

    outcome = dispatched.value
    message = (
        "Export queued for processing"
        if outcome.queued
        else "Export processed synchronously"
    )
    return ApiResponse(
        data=CreateExportResponseDTO(
            export_id=export.id,
            status=outcome.status,
            execution=outcome.mode,
            message=message,
        )
    )


@router.get("/exports", response_model=ApiResponse[List[ExportStatusDTO]], status_code=status.HTTP_200_OK)
async def list_exports(
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """List the current user's exports, newest first"""
    result = await ListUserExportsUseCase(uow, download_base=DOWNLOAD_BASE).execute(
        user_id=current_user["user_id"]
    )

    if result.is_err():
        raise_for_error(result.error)

    return ApiResponse(data=result.value)


@router.get(
    "/exports/{export_id}", response_model=ApiResponse[ExportStatusDTO], status_code=status.HTTP_200_OK
)
async def get_export_status(
    export_id: str,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Get the current status of an export"""
    result = await GetExportStatusUseCase(uow, download_base=DOWNLOAD_BASE).execute(
        export_id=export_id, user_id=current_user["user_id"]
    )

    if result.is_err():
        raise_for_error(result.error)

    return ApiResponse(data=result.value)


@router.get("/exports/{export_id}/download", status_code=status.HTTP_200_OK)
async def download_export(
    export_id: str,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
    file_storage: FileStorage = Depends(get_file_storage),
):
    """Download the JSON report of a completed export"""
    result = await DownloadExportUseCase(uow, file_storage).execute(
        export_id=export_id, user_id=current_user["user_id"]
    )

    if result.is_err():
        raise_for_error(result.error)

    download = result.value
    return Response(
        content=download.content,
        media_type="application/json",
        headers={"Content-Disposition": f'attachment; filename="{download.filename}"'},
    )
