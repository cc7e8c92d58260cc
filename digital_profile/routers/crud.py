"""
Admin mutation endpoints shared by the profile datasets.
"""
from fastapi import APIRouter, Body, Depends
from sqlalchemy.orm import Session

from digital_profile.auth import CurrentUser, get_current_user
from digital_profile.database import get_db
from digital_profile.schemas.common import ErrorResponse, MutationResponse

ERROR_RESPONSES = {
    401: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
    409: {"model": ErrorResponse},
}


def register_mutations(router: APIRouter, service_class, payload_schema, label: str):
    """
    Add POST "", PUT "/{record_id}" and DELETE "/{record_id}" to ``router``.

    ``payload_schema`` validates the request body. Updates apply only the
    fields the caller sends.
    """

    @router.post("", response_model=MutationResponse, responses=ERROR_RESPONSES, summary=f"Create {label}")
    def create_record(
        payload: payload_schema = Body(...),
        db: Session = Depends(get_db),
        user: CurrentUser = Depends(get_current_user)
    ):
        service = service_class(db)
        return service.create(payload.model_dump(), user)

    @router.put("/{record_id}", response_model=MutationResponse, responses=ERROR_RESPONSES, summary=f"Update {label}")
    def update_record(
        record_id: str,
        payload: payload_schema = Body(...),
        db: Session = Depends(get_db),
        user: CurrentUser = Depends(get_current_user)
    ):
        service = service_class(db)
        return service.update(record_id, payload.model_dump(exclude_unset=True, exclude={"id"}), user)

    @router.delete("/{record_id}", response_model=MutationResponse, responses=ERROR_RESPONSES, summary=f"Delete {label}")
    def delete_record(
        record_id: str,
        db: Session = Depends(get_db),
        user: CurrentUser = Depends(get_current_user)
    ):
        service = service_class(db)
        return service.delete(record_id, user)

    return router
