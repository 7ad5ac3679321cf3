# Utility modules for the recipe API
from .image_handler import save_uploaded_image, validate_and_process_image, ImageValidationError
from .sanitizer import sanitize_text, sanitize_multiline, sanitize_url, sanitize_rating
