"""Request building and dispatch."""
from .models import RequestDescriptor
from .request_builder import RequestBuilder
from .request_handler import RequestHandler

# Alias under the component's descriptive name
RequestDescriptorBuilder = RequestBuilder

__all__ = [
    'RequestBuilder',
    'RequestDescriptorBuilder',
    'RequestDescriptor',
    'RequestHandler',
]
