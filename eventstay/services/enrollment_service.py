from sqlalchemy.ext.asyncio import AsyncSession

from eventstay.core.errors import NotFoundError
from eventstay.core.logging import get_logger
from eventstay.models import Enrollment
from eventstay.repositories import enrollment_repository
from eventstay.schemas.enrollment import EnrollmentUpsert

logger = get_logger(__name__)


async def get_enrollment(db: AsyncSession, user_id: int) -> Enrollment:
    enrollment = await enrollment_repository.find_by_user_id(db, user_id)
    if not enrollment:
        raise NotFoundError("Enrollment not found")
    return enrollment


async def save_enrollment(db: AsyncSession, user_id: int, data: EnrollmentUpsert) -> Enrollment:
    """Create or update the user's enrollment."""
    enrollment = await enrollment_repository.upsert(db, user_id, data.model_dump())
    logger.info("enrollment_saved", enrollment_id=enrollment.id, user_id=user_id)
    return enrollment
