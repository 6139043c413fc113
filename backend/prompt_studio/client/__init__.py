from .gateway import ApiGateway, ProjectGateway
from .local_gateway import LocalGateway
from .store import PendingChanges, ProjectStore
from .autosave import AutosaveController
from .generation import GenerationClient

__all__ = [
    "ApiGateway",
    "ProjectGateway",
    "LocalGateway",
    "PendingChanges",
    "ProjectStore",
    "AutosaveController",
    "GenerationClient",
]
