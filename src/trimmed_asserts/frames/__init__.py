from .capture import build_traceback, frames_from_traceback
from .models import Frame, split_qualname

__all__ = ["Frame", "build_traceback", "frames_from_traceback", "split_qualname"]
