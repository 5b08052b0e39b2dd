from .collapsed_reader import (
    CollapsedReader,
    is_thread_id_frame,
    looks_like_thread_frame,
    strip_thread_frame,
)

__all__ = ["CollapsedReader", "is_thread_id_frame", "looks_like_thread_frame", "strip_thread_frame"]
