from fastapi import Request

from app.db.store import MappingStore


def get_store(request: Request) -> MappingStore:
    """
    FastAPI dependency: the process-wide store built at startup.
    Usage: store: MappingStore = Depends(database.get_store)
    """
    return request.app.state.store
