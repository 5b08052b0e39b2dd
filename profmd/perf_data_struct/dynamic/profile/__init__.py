from .perf_data import *
from .sample_data import *
from .calling_context_tree import CallTree

__all__ = ['CollapsedProfile', 'StackSample', 'CallTree']
