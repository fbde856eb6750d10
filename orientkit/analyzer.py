"""
File-level orientation helpers.
"""
import hashlib
from pathlib import Path
from typing import Dict, Any, Union
import logging

from orientkit.core.extensions import is_jpeg
from orientkit.image.orientation import OrientationReader

logger = logging.getLogger(__name__)


def sha256_file(path: Path, chunk_size: int = 65536) -> str:
    """Calculate SHA256 hash of file."""
    hasher = hashlib.sha256()
    with open(path, "rb") as f:
        while chunk := f.read(chunk_size):
            hasher.update(chunk)
    return hasher.hexdigest()


def _validate_input(path: Path) -> None:
    if not path.exists():
        raise ValueError(f"Image file does not exist: {path}")
    if not path.is_file():
        raise ValueError(f"Path is not a file: {path}")
    if not is_jpeg(path):
        raise ValueError(f"Unsupported file type: {path.suffix.lower()}")


def read_orientation_file(path: Union[str, Path], reader: OrientationReader = None) -> int:
    """
    Read the Exif orientation code of a JPEG file.
    
    Returns:
        Orientation code, or -1 if the file carries none
    """
    path = Path(path)
    _validate_input(path)
    reader = reader or OrientationReader()
    
    try:
        return reader.read(path.read_bytes()).orientation
    except Exception as e:
        logger.error(f"Error reading orientation of {path}: {e}")
        raise


def analyze_photo(path: Union[str, Path]) -> Dict[str, Any]:
    """
    Analyze orientation of a photo file.
    
    Returns:
        Dict with file identity and orientation fields
    """
    path = Path(path)
    _validate_input(path)
    
    result = OrientationReader().read(path.read_bytes())
    info = result.info
    
    return {
        "filename": path.name,
        "sha256sum": sha256_file(path),
        "orientation": int(result.orientation),
        "rotation": info.rotation if info else None,
        "flipped": info.flipped if info else None,
        "diagnostic": result.diagnostic,
    }
