"""Built-in ignore tables and limits used while flattening a project."""

IGNORE_DIRS: set[str] = {
    # Version control and editors
    ".git", ".idea", ".vscode", ".vs",
    # Python and Node
    "__pycache__", "node_modules", "venv", ".venv", "env",
    # Build outputs
    "dist", "build", "target", "out", "bin", "obj", "debug", "release",
    # Gradle / Android
    ".gradle", "captures", "gradle",
    # Misc
    ".DS_Store", "coverage", ".next", ".nuxt",
}

# Hidden directories are pruned, except these
ALLOWED_HIDDEN_DIRS: set[str] = {".github"}

# Compared against the lowercased file name
IGNORE_FILENAMES: set[str] = {
    "gradlew", "gradlew.bat", "mvnw", "mvnw.cmd",
    "local.properties", "thumbs.db", "desktop.ini",
    "package-lock.json", "yarn.lock", "pnpm-lock.yaml", "cargo.lock", "poetry.lock",
}

IGNORE_EXTENSIONS: set[str] = {
    # Media
    ".png", ".jpg", ".jpeg", ".gif", ".bmp", ".ico", ".svg", ".webp", ".tiff",
    ".mp3", ".mp4", ".wav", ".avi", ".mov",
    # Binaries and archives
    ".exe", ".dll", ".so", ".dylib", ".bin", ".apk", ".aab", ".jar", ".war",
    ".zip", ".tar", ".gz", ".7z", ".rar", ".iso", ".cab",
    # Build intermediates, databases, logs
    ".pyc", ".class", ".o", ".obj", ".pdb", ".suo",
    ".db", ".sqlite", ".sqlite3", ".lock", ".log",
    # Generated documents
    ".md",
}

MAX_FILE_SIZE = 1024 * 1024
SNIFF_BYTES = 1024

# Used when the source has no base name (a filesystem root)
FALLBACK_DOCUMENT_NAME = "project-code"

OUTPUT_FORMATS: dict[str, str] = {
    "markdown": "md",
    "xml": "xml",
}
DEFAULT_FORMAT = "markdown"

# Temporary documents are written as ".<document name>.<random>" + TEMP_SUFFIX
TEMP_SUFFIX = ".code2xml.tmp"
