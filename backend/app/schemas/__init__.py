from app.schemas.event import EventCreate, EventUpdate, EventResponse, EventListResponse
from app.schemas.booking import BookingCreate, BookingUpdate, BookingResponse
from app.schemas.error import ErrorResponse

__all__ = [
    "EventCreate", "EventUpdate", "EventResponse", "EventListResponse",
    "BookingCreate", "BookingUpdate", "BookingResponse", "ErrorResponse",
]
