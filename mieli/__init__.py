from mieli._client import Client
from mieli._version import VERSION
from mieli.index import Index
from mieli.models.config import ClientConfig

__version__ = VERSION


__all__ = ["Client", "ClientConfig", "Index"]
