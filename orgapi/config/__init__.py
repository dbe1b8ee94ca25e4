from .config import ServiceConfig
from .enums import GraphBackend
