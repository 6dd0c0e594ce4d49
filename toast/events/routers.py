from fastapi import APIRouter

from .features.create_event.router import router as create_event_router
from .features.get_event.router import router as get_event_router
from .features.list_attendees.router import router as list_attendees_router
from .features.list_events.router import router as list_events_router
from .features.poll_results.router import router as poll_results_router
from .features.replace_fields.router import router as replace_fields_router
from .features.set_media_link.router import router as set_media_link_router
from .features.share_event.router import router as share_event_router
from .features.submit_response.router import router as submit_response_router

router = APIRouter()

router.include_router(create_event_router)
router.include_router(list_events_router)
router.include_router(get_event_router)
router.include_router(replace_fields_router)
router.include_router(set_media_link_router)
router.include_router(share_event_router)
router.include_router(submit_response_router)
router.include_router(poll_results_router)
router.include_router(list_attendees_router)
