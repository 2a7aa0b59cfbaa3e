"""
Сохранение RGBA8‑буфера трассировщика в файл через Pillow.
"""

from pathlib import Path
from PIL import Image
from raytracer.core.extent import ImageExtent2D
from raytracer.utils.logger import logger

def save_image(data: bytes, extent: ImageExtent2D, path) -> Path:
    """
    Записать RGBA‑байты (построчно) в файл. Формат – по расширению.
    Ошибки файловой системы логируются и пробрасываются дальше.
    """
    expected = extent.size() * 4
    if len(data) != expected:
        raise ValueError(
            f"Image data has {len(data)} bytes, expected {expected} "
            f"for {extent.width}x{extent.height} RGBA"
        )

    p = Path(path).expanduser()
    img = Image.frombytes("RGBA", (extent.width, extent.height), bytes(data))
    try:
        img.save(p)
    except OSError as exc:
        logger.error(f"[Image] Unable to save {p}: {exc}")
        raise

    logger.info(f"[Image] Image saved: {p}")
    return p
