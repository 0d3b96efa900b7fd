# raster I/O glue: decode to RGB arrays, encode results
# houghlines/utils/image.py
from __future__ import annotations
from pathlib import Path
import numpy as np
from PIL import Image
from houghlines.utils.io import ensure_dir

def ensure_rgb(img: Image.Image) -> Image.Image:
    return img.convert("RGB") if img.mode != "RGB" else img

def open_image(path: str | Path) -> Image.Image:
    return ensure_rgb(Image.open(path))

def to_array(img: Image.Image) -> np.ndarray:
    """(H, W, 3) uint8 RGB."""
    return np.asarray(ensure_rgb(img), dtype=np.uint8).copy()

def load_rgb(path: str | Path) -> np.ndarray:
    return to_array(open_image(path))

def save_rgb(pixels: np.ndarray, path: str | Path) -> str:
    p = Path(path); ensure_dir(p.parent)
    Image.fromarray(np.ascontiguousarray(pixels[..., :3], dtype=np.uint8)).save(p)
    return str(p)

def save_grey(grey: np.ndarray, path: str | Path) -> str:
    p = Path(path); ensure_dir(p.parent)
    Image.fromarray(np.ascontiguousarray(grey, dtype=np.uint8)).save(p)
    return str(p)
