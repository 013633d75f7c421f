from typing import Iterator

from core.clients_api import ClientsAPI


def get_clients_api() -> Iterator[ClientsAPI]:
    """Per-request clients API client, closed when the request finishes."""
    api = ClientsAPI()
    try:
        yield api
    finally:
        api.close()
