"""Loaders: component registry population and file export."""

from .component_registry import ComponentRegistry
from .registry_loader import RegistryLoader
from .file_loader import FileLoader

__all__ = ['ComponentRegistry', 'FileLoader', 'RegistryLoader']
