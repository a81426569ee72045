"""
Enrollment endpoints for the authenticated user.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from eventstay.db.session import get_db
from eventstay.core.security import get_current_user_id
from eventstay.schemas.enrollment import EnrollmentUpsert, EnrollmentResponse
from eventstay.services.enrollment_service import get_enrollment, save_enrollment

router = APIRouter(prefix="/enrollments", tags=["Enrollments"])


@router.get("", response_model=EnrollmentResponse)
async def get_enrollment_endpoint(
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    return await get_enrollment(db, user_id)


@router.post("", response_model=EnrollmentResponse)
async def save_enrollment_endpoint(
    data: EnrollmentUpsert,
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    """Create the user's enrollment or update it in place."""
    return await save_enrollment(db, user_id, data)
