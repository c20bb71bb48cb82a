import json

from aws_lambda_powertools.event_handler import Response, content_types


def api_response(status_code: int, body: dict) -> Response:
    """API Gateway HTTP API の JSON レスポンスを生成する"""
    return Response(
        status_code=status_code,
        content_type=content_types.APPLICATION_JSON,
        body=json.dumps(body, default=str, ensure_ascii=False),
    )
