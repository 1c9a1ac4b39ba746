__path__ = __import__("pkgutil").extend_path(__path__, __name__)

from .interfaces import DocumentAdapter, DocumentLoadError
from .adapters.xml_adapter import XmlAdapter

__all__ = ["DocumentAdapter", "DocumentLoadError", "XmlAdapter"]
