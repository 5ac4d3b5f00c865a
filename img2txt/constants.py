"""All magic values live here — no inline literals anywhere else."""

# API endpoints
BASE_URL = "https://img2txt.io/api/"
UPLOAD_URL_PATH = "get-upload-url"
IMAGE_TO_TEXT_PATH = "image-to-text"

# Multipart field the storage endpoint expects the file under
UPLOAD_FIELD = "file"

# Request defaults
DEFAULT_OUTPUT_TYPE = "raw"

# Pause between upload and extraction so the object store catches up.
# A flat wait, not a poll: the service gives no consistency signal.
SETTLE_DELAY_SECONDS: float = 0.2

# Environment variables
ENV_API_KEY = "IMG2TXT_API_KEY"
ENV_BASE_URL = "IMG2TXT_BASE_URL"
ENV_SETTLE_DELAY = "IMG2TXT_SETTLE_DELAY"
ENV_TIMEOUT = "IMG2TXT_TIMEOUT"
ENV_LOG_LEVEL = "LOG_LEVEL"
DEFAULT_LOG_LEVEL = "INFO"

# Log messages
MSG_REQUESTING_UPLOAD_URL = "Requesting upload URL for %s (%d bytes)"
MSG_UPLOADING = "Uploading %s"
MSG_UPLOADED = "Uploaded %s → %s"
MSG_SUBMITTING = "Submitting %s for extraction (outputType=%s)"
MSG_EXTRACTED = "Extraction finished (success=%s)"
MSG_PHASE_FAILED = "✗ %s"

# Error messages
ERR_API_KEY_REQUIRED = "API Key is required and must be a string."
ERR_FILE_NOT_FOUND = "File not found or is not a file: %s"
ERR_INVALID_STRUCTURE = "outputStructure must be valid JSON: %s"
ERR_MISSING_UPLOAD_FIELDS = "Invalid upload-url response: Missing URL or Key. Status: %d"
ERR_MISSING_UFS_URL = "Invalid upload response: Missing UFS URL. Status: %d"
ERR_MISSING_RESULT_FIELDS = "Invalid image-to-text response: Missing success or text. Status: %d"
ERR_NOT_JSON_OBJECT = "Expected a JSON object in response. Status: %d"
ERR_HTTP_STATUS = "API call failed: %d - %s"
ERR_PROCESSING_FAILED = "Processing failed: %s"
ERR_IMAGE_PROCESSING = "Image processing failed: %s"
ERR_ENV_NOT_SET = "%s must be set in .env"
ERR_ENV_NOT_NUMBER = "%s must be a finite non-negative number, got %r"
