# DEFAULTS
DEFAULT_ROOT_DIR = "target"
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8090

# URL PREFIXES
HOME_PREFIX = "/home"

# ENTRY TYPES
FILE = "file"
DIRECTORY = "directory"

# MUTATION OPERATIONS
CREATE = "create"
UPLOAD = "upload"
REPLACE = "replace"

# CONTENT TYPES
MULTIPART_FORM_DATA = "multipart/form-data"

# ENV
HOMEFS_ROOT = "HOMEFS_ROOT"
HOMEFS_CONFIG = "HOMEFS_CONFIG"
