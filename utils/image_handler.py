"""
Image Validation and Processing Module

Validates uploaded recipe images and re-encodes them through Pillow to
strip anything that is not pixel data. Every stored image is a JPEG.
"""

import os
import secrets
import time
from io import BytesIO

from PIL import Image

from constants import ALLOWED_EXTENSIONS


class ImageValidationError(Exception):
    """Upload rejected: wrong type, too large or not decodable."""


# Pillow format names accepted as input
ALLOWED_FORMATS = {'JPEG', 'PNG', 'GIF', 'WEBP'}

# Hard limits on what is decoded at all
MAX_WIDTH = 4096
MAX_HEIGHT = 4096
MAX_FILE_SIZE = 10 * 1024 * 1024


def allowed_file(filename):
    return '.' in filename and filename.rsplit('.', 1)[1].lower() in ALLOWED_EXTENSIONS


def unique_filename(extension='.jpg'):
    """Timestamp plus random suffix, e.g. 1718000000000-483920.jpg"""
    return f"{int(time.time() * 1000)}-{secrets.randbelow(10**6)}{extension}"


def _read_upload(image_data):
    if isinstance(image_data, bytes):
        return image_data
    image_data.seek(0)
    return image_data.read()


def _open_checked(content):
    """Open image bytes after a verify() pass; verify() leaves its image unusable."""
    Image.open(BytesIO(content)).verify()
    img = Image.open(BytesIO(content))

    if img.format not in ALLOWED_FORMATS:
        raise ImageValidationError(
            f"Unsupported image format {img.format}; expected one of {', '.join(sorted(ALLOWED_FORMATS))}"
        )
    width, height = img.size
    if width > MAX_WIDTH or height > MAX_HEIGHT:
        raise ImageValidationError(f"Image is {width}x{height}; the limit is {MAX_WIDTH}x{MAX_HEIGHT}")
    return img


def _to_rgb(img):
    """JPEG has no alpha channel, so transparent pixels land on white."""
    if img.mode in ('RGBA', 'LA', 'P'):
        img = img.convert('RGBA')
        background = Image.new('RGB', img.size, (255, 255, 255))
        background.paste(img, mask=img.getchannel('A'))
        return background
    if img.mode != 'RGB':
        return img.convert('RGB')
    return img


def validate_and_process_image(image_data, output_path, max_width=2048, max_height=2048):
    """
    Check a recipe photo and store it as a JPEG next to output_path.

    Photos larger than max_width x max_height are scaled down. Returns the
    path actually written (output_path with a .jpg extension).

    Raises:
        ImageValidationError: not an allowed image, too large, or unreadable
    """
    content = _read_upload(image_data)
    if len(content) > MAX_FILE_SIZE:
        raise ImageValidationError(f"Image is {len(content)} bytes; the limit is {MAX_FILE_SIZE}")

    try:
        img = _open_checked(content)
        img.thumbnail((max_width, max_height), Image.Resampling.LANCZOS)
        img = _to_rgb(img)

        jpeg_path = os.path.splitext(output_path)[0] + '.jpg'
        img.save(jpeg_path, 'JPEG', quality=85, optimize=True)
    except Image.DecompressionBombError:
        raise ImageValidationError("Image decodes to too many pixels")
    except (OSError, EOFError, ValueError, SyntaxError) as e:
        raise ImageValidationError(f"Invalid or corrupted image: {e}")
    return jpeg_path


def save_uploaded_image(file_storage, upload_folder):
    """
    Validate an upload from request.files and store it under a fresh name.

    Returns:
        str: The stored file name (relative to upload_folder)

    Raises:
        ImageValidationError: If the file is missing, has a bad extension or is not a valid image
    """
    if file_storage is None or not file_storage.filename:
        raise ImageValidationError("No file uploaded")
    if not allowed_file(file_storage.filename):
        raise ImageValidationError("Only image files are allowed")

    os.makedirs(upload_folder, exist_ok=True)
    output_path = validate_and_process_image(file_storage.stream, os.path.join(upload_folder, unique_filename()))
    return os.path.basename(output_path)
