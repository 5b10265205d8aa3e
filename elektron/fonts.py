"""
Font file lookup for the `/fonts/{filename}` route.

Filenames are checked before touching the disk, and the resolved path must
stay inside the font directory even when symlinks are involved.
"""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from starlette.concurrency import run_in_threadpool

FONT_MEDIA_TYPES = {
    ".woff2": "font/woff2",
    ".woff": "font/woff",
    ".ttf": "font/ttf",
}
FONT_CACHE_CONTROL = "public, max-age=31536000"


class FontError(Exception):
    status_code = 500


class FontBadName(FontError):
    status_code = 400


class FontNotFound(FontError):
    status_code = 404


class FontForbidden(FontError):
    status_code = 403


class FontIoError(FontError):
    status_code = 500


def font_error_status(exc: FontError) -> int:
    return exc.status_code


@dataclass
class FontFile:
    content: bytes
    media_type: str


def font_media_type(filename: str) -> str:
    for extension, media_type in FONT_MEDIA_TYPES.items():
        if filename.endswith(extension):
            return media_type
    raise FontBadName(f"unsupported font extension: {filename}")


def validate_font_name(filename: str) -> str:
    """Reject traversal attempts and unknown extensions; return the media type."""
    if ".." in filename or "/" in filename or "\\" in filename:
        raise FontBadName(f"invalid font filename: {filename}")
    return font_media_type(filename)


def resolve_font_path(font_dir: Path, filename: str) -> Path:
    try:
        base = font_dir.resolve(strict=True)
    except (OSError, RuntimeError, ValueError) as exc:
        raise FontIoError(f"font directory unavailable: {font_dir}") from exc

    try:
        path = (base / filename).resolve(strict=True)
    except (OSError, RuntimeError, ValueError) as exc:
        raise FontNotFound(f"font not found: {filename}") from exc

    if not path.is_relative_to(base):
        raise FontForbidden(f"font path escapes font directory: {filename}")
    return path


async def load_font(font_dir: Path, filename: str) -> FontFile:
    media_type = validate_font_name(filename)
    path = resolve_font_path(font_dir, filename)
    try:
        content = await run_in_threadpool(path.read_bytes)
    except OSError as exc:
        raise FontIoError(f"failed to read font: {filename}") from exc
    return FontFile(content=content, media_type=media_type)
