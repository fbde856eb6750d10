"""
Example: Reading JPEG orientation with orientkit

This example demonstrates how to:
- Read the Exif orientation of JPEG files
- Collect diagnostics when the orientation is unknown
- Display an image upright with Pillow
"""
import asyncio
from pathlib import Path
from orientkit import (
    OrientationReader,
    OrientationFixer,
    InvalidJpegError,
    get_orientation_async,
    is_jpeg,
)


def report_folder(folder: Path):
    """Print orientation details for every JPEG in a folder."""
    reader = OrientationReader(observer=lambda msg: print(f"  note: {msg}"))
    
    for path in sorted(p for p in folder.iterdir() if is_jpeg(p)):
        print(path.name)
        try:
            result = reader.read(path.read_bytes())
        except InvalidJpegError as e:
            print(f"  invalid: {e}")
            continue
        
        if result.info:
            print(f"  rotate {result.info.rotation}, flipped: {result.info.flipped}")
        else:
            print(f"  orientation: {result.orientation}")


async def read_many(paths):
    """Read orientations concurrently on one event loop."""
    return await asyncio.gather(*(get_orientation_async(p.read_bytes()) for p in paths))


def save_upright(image_path: Path, output_path: Path):
    """Write an upright copy of a JPEG for display."""
    img = OrientationFixer.fix_bytes(image_path.read_bytes())
    img.save(output_path, quality=90)
    print(f"Saved: {output_path}")


if __name__ == "__main__":
    import sys
    
    if len(sys.argv) < 2:
        print("Usage: python read_orientation.py <folder_path>")
        sys.exit(1)
    
    folder = Path(sys.argv[1])
    if not folder.exists():
        print(f"Folder not found: {folder}")
        sys.exit(1)
    
    report_folder(folder)
    
    jpegs = [p for p in folder.iterdir() if is_jpeg(p)]
    print(asyncio.run(read_many(jpegs)))
