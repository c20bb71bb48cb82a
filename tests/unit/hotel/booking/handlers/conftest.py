import json
from dataclasses import dataclass

import pytest

from hotel.booking.applications.booking_ledger import BookingLedger
from hotel.booking.handlers import api
from hotel.booking.infrastructure import InMemoryBookingRepository
from hotel.room.infrastructure import InMemoryRoomDirectory


@dataclass
class FakeLambdaContext:
    function_name: str = "booking-api"
    memory_limit_in_mb: int = 128
    invoked_function_arn: str = (
        "arn:aws:lambda:ap-northeast-1:123456789012:function:booking-api"
    )
    aws_request_id: str = "52fdfc07-2182-154f-163f-5f0f9a621d72"


@pytest.fixture
def lambda_context():
    return FakeLambdaContext()


@pytest.fixture
def http_event():
    """API Gateway HTTP API (v2) イベントを生成する Factory fixture"""

    def _factory(method: str, path: str, body: dict | None = None) -> dict:
        return {
            "version": "2.0",
            "routeKey": "$default",
            "rawPath": path,
            "rawQueryString": "",
            "headers": {"content-type": "application/json"},
            "requestContext": {
                "accountId": "123456789012",
                "apiId": "api-id",
                "domainName": "id.execute-api.ap-northeast-1.amazonaws.com",
                "domainPrefix": "id",
                "http": {
                    "method": method,
                    "path": path,
                    "protocol": "HTTP/1.1",
                    "sourceIp": "192.168.0.1",
                    "userAgent": "agent",
                },
                "requestId": "id",
                "routeKey": "$default",
                "stage": "$default",
                "time": "12/Mar/2020:19:03:58 +0000",
                "timeEpoch": 1583348638390,
            },
            "body": None if body is None else json.dumps(body),
            "isBase64Encoded": False,
        }

    return _factory


@pytest.fixture
def booking_api(monkeypatch, mock_notification_sender):
    """テストごとに新しい客室台帳・予約台帳を差し込む"""
    room_directory = InMemoryRoomDirectory()
    ledger = BookingLedger(
        room_directory=room_directory,
        notification_sender=mock_notification_sender,
        repository=InMemoryBookingRepository(),
    )
    monkeypatch.setattr(api, "room_directory", room_directory)
    monkeypatch.setattr(api, "ledger", ledger)
    return api
