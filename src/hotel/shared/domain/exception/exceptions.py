class DomainException(Exception):
    """ドメイン層で発生する基底例外"""

    pass


class InvalidOperationException(DomainException, ValueError):
    """不正な操作（入力不備・空室なし・予約なし など）

    呼び出し元の入力に起因するため、ValueError としても捕捉できる。
    """

    pass
