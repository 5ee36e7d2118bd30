"""PIL/tensor conversion helpers for the clipping showcase."""

from __future__ import annotations

import numpy as np
import torch
from PIL import Image


def pil2tensor(image: Image.Image) -> torch.Tensor:
    """Convert a PIL image into a ComfyUI ``IMAGE`` batch of one."""
    array = np.asarray(image.convert("RGB")).astype(np.float32) / 255.0
    return torch.from_numpy(array).unsqueeze(0)
