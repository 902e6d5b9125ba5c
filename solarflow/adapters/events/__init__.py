from .publishers import InMemoryEventPublisher, SynchronousEventPublisher

__all__ = ["SynchronousEventPublisher", "InMemoryEventPublisher"]
