"""
Application shell - boots the UI runtime with persisted translations and
keeps the translation store in sync with it
"""

from .bootstrap import bootstrap
from .ports import OutboundPort, RuntimePorts
from .runtime import TranslationRuntime

__all__ = ["OutboundPort", "RuntimePorts", "TranslationRuntime", "bootstrap"]
