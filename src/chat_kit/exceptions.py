"""chat-kit の例外"""


class ChatKitError(Exception):
    """chat-kit関連のエラーの基底クラス"""


class ResponseDecodeError(ChatKitError):
    """APIレスポンスのデコードに失敗した場合のエラー"""

    def __init__(self, message: str, raw: str | bytes | dict) -> None:
        """初期化

        Args:
            message: エラーメッセージ
            raw: デコードしようとした生のレスポンス
        """
        super().__init__(message)
        self.raw = raw


class ChatAPIError(ChatKitError):
    """APIが ok: false を返した場合のエラー"""

    def __init__(self, message: str, error_code: str) -> None:
        """初期化

        Args:
            message: エラーメッセージ
            error_code: APIから返されたエラーコード
        """
        super().__init__(message)
        self.error_code = error_code
