class SearchClientError(Exception):
    """클라이언트 공통 베이스 예외"""
    pass

class TransportError(SearchClientError):
    """네트워크 실패 또는 2xx 가 아닌 응답"""
    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code
