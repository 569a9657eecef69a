from app.models.event import Event
from app.models.booking import Booking

__all__ = ["Event", "Booking"]
