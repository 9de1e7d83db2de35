"""AI image-signal-processing attributes and the parameter-update hook."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional

U32_MAX = 0xFFFFFFFF

UpdateFunc = Callable[[Any, Any], int]


@dataclass
class AiIspCallback:
    """Function called to update denoise parameters, with its private data."""

    update: UpdateFunc
    private_data: Any = None


@dataclass
class AiIspAttr:
    """Whether AI ISP is on, its model, frame buffers and picture size."""

    enable: bool = False
    callback: Optional[AiIspCallback] = None
    model_file_path: Optional[str] = None
    frame_buf_cnt: int = 0
    width: int = 0
    height: int = 0

    def __post_init__(self) -> None:
        for name in ("frame_buf_cnt", "width", "height"):
            value = getattr(self, name)
            if not 0 <= value <= U32_MAX:
                raise ValueError(f"{name} must be in [0, {U32_MAX}], got {value}")

    def update(self, ainr_param: Any) -> int:
        """Pass new denoise parameters to the callback and return its status."""
        if self.callback is None:
            raise RuntimeError("no update callback is set")
        return self.callback.update(ainr_param, self.callback.private_data)