from fastapi import Request

from app.storage.base import Storage


def get_storage(request: Request) -> Storage:
    """
    Dependency returning the storage bound to the app by `create_app`.
    Tests swap it through `app.dependency_overrides`.
    """
    return request.app.state.storage
