"""Project-wide constants for the conversion service contract."""

DEFAULT_CONVERTER_HOST: str = "localhost"
DEFAULT_CONVERTER_PORT: int = 8000

CONVERT_ENDPOINT: str = "/convert"
UPLOAD_FIELD_NAME: str = "files"  # shared multipart field, one part per file

DEFAULT_ARTIFACT_FILENAME: str = "snapmerge-converted.pdf"

HEADER_REQUEST_ID: str = "X-Request-ID"
HEADER_PROCESSED_IMAGES: str = "X-Processed-Images"
HEADER_TOTAL_FILES: str = "X-Total-Files"
HEADER_SKIPPED_FILES: str = "X-Skipped-Files"
