from __future__ import annotations

import os
from dataclasses import dataclass

_TRUTHY = frozenset({"1", "true", "yes", "on"})


def _env_flag(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in _TRUTHY


@dataclass(frozen=True)
class BookingSettings:
    """予約台帳の設定

    - locale: 通知・エラーメッセージの言語
    - reject_duplicate_ids: 同一予約IDの二重登録を拒否する
    - rollback_on_failure: 状態変更後に外部呼び出しが失敗したら補償する
    """

    locale: str = "en"
    reject_duplicate_ids: bool = False
    rollback_on_failure: bool = False

    @classmethod
    def from_env(cls) -> BookingSettings:
        """環境変数から設定を読み込む"""
        return cls(
            locale=os.getenv("BOOKING_LOCALE", "en"),
            reject_duplicate_ids=_env_flag("BOOKING_REJECT_DUPLICATE_IDS"),
            rollback_on_failure=_env_flag("BOOKING_ROLLBACK_ON_FAILURE"),
        )
