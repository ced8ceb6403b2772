"""Client surface: assembly (:func:`new_client`) and dispatch (:class:`Client`)."""

from .assembler import build_sdk_client, new_client
from .client import Client

__all__ = ["Client", "build_sdk_client", "new_client"]
