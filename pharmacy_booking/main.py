import logging

from fastapi import FastAPI

from .config import settings
from .routers import slots
from .services.slots import get_booking_config, get_override_rules

logging.basicConfig(level=settings.log_level)

# Fail at startup on bad config or rule file
get_override_rules()

app = FastAPI(title="Pharmacy Booking Slots API")
app.include_router(slots.router)


@app.get("/health")
def health():
    return {"status": "ok", "timezone": get_booking_config().pharmacy_timezone}
