from typing import Callable, TypeVar

from aws_lambda_powertools.event_handler import APIGatewayHttpResolver, Response
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from hotel.booking.applications.booking_ledger import BookingLedger
from hotel.booking.domain import BookingId
from hotel.booking.handlers.request_models import AddRoomRequest, CreateBookingRequest
from hotel.booking.handlers.response_models import to_booking_data, to_room_data
from hotel.booking.infrastructure import InMemoryBookingRepository
from hotel.notification.infrastructure import LoggingNotificationSender
from hotel.room.domain import Room, RoomId
from hotel.room.infrastructure import InMemoryRoomDirectory
from hotel.shared.config import BookingSettings
from hotel.shared.domain import (
    Currency,
    CustomerId,
    InvalidOperationException,
    Money,
)
from hotel.shared.utils import api_response, get_logger

logger = get_logger()
app = APIGatewayHttpResolver()

T = TypeVar("T")

# NOTE: 予約台帳はプロセス（Lambda 実行環境）ごとに1つだけ生成する
room_directory = InMemoryRoomDirectory()
ledger = BookingLedger(
    room_directory=room_directory,
    notification_sender=LoggingNotificationSender(logger),
    repository=InMemoryBookingRepository(),
    settings=BookingSettings.from_env(),
)


def _optional(factory: Callable[[int], T], value: int | None) -> T | None:
    return None if value is None else factory(value)


def _parse_booking_id(raw: str) -> BookingId:
    try:
        return BookingId(int(raw))
    except ValueError:
        raise InvalidOperationException(
            ledger.messages.booking_not_found_for(raw)
        ) from None


def _json_payload() -> dict:
    if not app.current_event.body:
        return {}
    return app.current_event.json_body


@app.post("/bookings")
def create_booking() -> Response:
    request = CreateBookingRequest.model_validate(_json_payload())
    booking = ledger.create_booking(
        booking_id=_optional(BookingId, request.booking_id),
        room_id=_optional(RoomId, request.room_id),
        customer_id=_optional(CustomerId, request.customer_id),
        start_date=request.start_date,
        end_date=request.end_date,
    )
    return api_response(201, to_booking_data(booking))


@app.delete("/bookings/<booking_id>")
def cancel_booking(booking_id: str) -> Response:
    ledger.cancel_booking(_parse_booking_id(booking_id))
    return api_response(200, {"status": "success"})


@app.get("/bookings")
def list_bookings() -> Response:
    bookings = [to_booking_data(booking) for booking in ledger.get_all_bookings()]
    return api_response(200, {"bookings": bookings, "count": len(bookings)})


@app.post("/rooms")
def add_room() -> Response:
    request = AddRoomRequest.model_validate(_json_payload())
    room = Room(
        id=RoomId(request.room_id),
        room_type=request.room_type,
        price=Money(
            amount=request.price_amount,
            currency=Currency(request.price_currency),
        ),
        available=request.available,
    )
    room_directory.add_room(room)
    return api_response(201, to_room_data(room))


@app.get("/rooms")
def list_rooms() -> Response:
    rooms = [to_room_data(room) for room in room_directory.list_all()]
    return api_response(200, {"rooms": rooms, "count": len(rooms)})


@app.exception_handler(ValidationError)
def handle_validation_error(ex: ValidationError) -> Response:
    logger.warning("Request validation failed", extra={"errors": str(ex)})
    return api_response(400, {"message": "Invalid request", "errors": ex.errors()})


@app.exception_handler(ValueError)
def handle_invalid_operation(ex: ValueError) -> Response:
    return api_response(400, {"message": str(ex)})


@logger.inject_lambda_context
def lambda_handler(event: dict, context: LambdaContext) -> dict:
    """予約台帳 HTTP API の Lambda ハンドラ"""
    logger.info(
        "Received booking request",
        extra={"path": event.get("rawPath"), "route": event.get("routeKey")},
    )
    return app.resolve(event, context)
