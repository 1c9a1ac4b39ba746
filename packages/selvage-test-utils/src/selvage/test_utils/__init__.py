from .bus import SpyBus
from .needle import MockNeedle
from .workspace import WorkspaceFactory
from .xml import parse_xml, to_xml, stamp, stamp_all
from .helpers import create_test_app, get_stored_fingerprints

__all__ = [
    "SpyBus",
    "MockNeedle",
    "WorkspaceFactory",
    "parse_xml",
    "to_xml",
    "stamp",
    "stamp_all",
    "create_test_app",
    "get_stored_fingerprints",
]
