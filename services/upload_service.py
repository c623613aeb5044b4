"""
Armazenamento local das imagens dos materiais.
O motor só recebe o caminho público (/uploads/<arquivo>).
"""
from fastapi import UploadFile
from pathlib import Path
from typing import Optional
import logging
import os
import time
from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)

UPLOAD_DIR = Path(os.getenv("UPLOAD_DIR", "uploads"))
UPLOAD_URL_PREFIX = "/uploads"


async def store_image(image: Optional[UploadFile]) -> Optional[str]:
    """Grava o arquivo como <timestamp>-<nome> e retorna o caminho público"""
    if image is None or not image.filename:
        return None

    UPLOAD_DIR.mkdir(parents=True, exist_ok=True)
    filename = f"{int(time.time() * 1000)}-{Path(image.filename).name}"
    contents = await image.read()
    (UPLOAD_DIR / filename).write_bytes(contents)

    logger.info("Stored image %s (%d bytes)", filename, len(contents))
    return f"{UPLOAD_URL_PREFIX}/{filename}"


def discard_image(image_path: Optional[str]) -> None:
    """Remove imagem gravada quando a operação que a usaria falhou"""
    if not image_path:
        return
    target = UPLOAD_DIR / Path(image_path).name
    if target.exists():
        target.unlink()
        logger.info("Discarded image %s", target.name)
