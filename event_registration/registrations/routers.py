from fastapi import APIRouter

from .features.edit_registration.router import router as edit_registration_router
from .features.get_registration.router import router as get_registration_router
from .features.register.router import router as register_router
from .features.resend_edit_link.router import router as resend_edit_link_router

router = APIRouter()

router.include_router(register_router)
router.include_router(get_registration_router)
router.include_router(edit_registration_router)
router.include_router(resend_edit_link_router)
