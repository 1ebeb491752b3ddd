"""File and directory utilities."""

import os
import tempfile
from datetime import datetime

from eleven_client.logger import Logger


def get_tempdir():
    """
    Get the temporary directory in a platform-agnostic way.
    Creates and returns /tmp/eleven_client for POSIX systems or %TEMP%/eleven_client for Windows.
    """
    # If the environment variable is set, use the full path directly
    temp_dir = os.getenv("ELEVEN_CLIENT_TEMP_DIR", None)

    if temp_dir is None:
        temp_dir = os.path.join(tempfile.gettempdir(), "eleven_client")
    os.makedirs(temp_dir, exist_ok=True)
    return temp_dir


def get_timestamped_audio_path(prefix: str, extension: str) -> str:
    """Build a unique audio file path inside the temp directory.

    Format: <tempdir>/audio/<prefix>_YYYYmmdd-HHMMSS-ffffff.<extension>
    """
    timestamp = datetime.now().strftime("%Y%m%d-%H%M%S-%f")
    audio_dir = os.path.join(get_tempdir(), "audio")
    os.makedirs(audio_dir, exist_ok=True)
    return os.path.join(audio_dir, f"{prefix}_{timestamp}.{extension}")


def write_binary(path: str, data: bytes) -> str:
    """Write bytes to ``path``, creating parent directories.

    Returns:
        str: The path written to
    """
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    with open(path, "wb") as f:
        f.write(data)
    Logger.print_debug(f"Wrote {len(data)} bytes to {path}")
    return path
