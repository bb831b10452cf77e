class DomainError(Exception):
    """도메인/유즈케이스 공통 베이스 예외"""
    pass

class ResourceNotFound(DomainError):
    def __init__(self, resource: str, detail: str | None = None):
        super().__init__(detail or f"{resource} not found")
        self.resource = resource

class IngestionError(DomainError):
    """스토리지 엔진이 문서 쓰기를 거부한 경우"""
    def __init__(self, index_name: str, doc_id: str, reason: str):
        super().__init__(f"Ingestion failed for {index_name}/{doc_id}: {reason}")
        self.index_name = index_name
        self.doc_id = doc_id
        self.reason = reason

class IndexDeletionFailed(DomainError):
    def __init__(self, index_name: str, reason: str):
        super().__init__(f"Index deletion failed for {index_name}: {reason}")
        self.index_name = index_name
        self.reason = reason
