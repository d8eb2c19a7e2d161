# ABOUTME: Background loading of the service key pair from fixed file names
# ABOUTME: Public key absence is an error, private key absence resolves to None

from concurrent.futures import Executor, ThreadPoolExecutor
from pathlib import Path
from typing import Optional, Union

from loguru import logger

from service_config.exceptions import MissingPublicKeyError
from service_config.models.config import KeyHandle

PUBLIC_KEY_FILE = "public_key.pem"
PRIVATE_KEY_FILE = "private_key.pem"


def read_public_key(path: Path) -> bytes:
    """Read the public key.

    Raises:
        MissingPublicKeyError: If the file cannot be read.
    """
    try:
        return path.read_bytes()
    except OSError as e:
        raise MissingPublicKeyError(str(path)) from e


def read_private_key(path: Path) -> Optional[bytes]:
    """Read the private key, returning None if the file cannot be read."""
    try:
        return path.read_bytes()
    except OSError as e:
        logger.debug(f"No private key at {path} ({e.strerror or e}), signing is unavailable")
        return None


class KeyLoader:
    """
    Starts key file reads on a small thread pool and hands back KeyHandles.

    Both reads are submitted together and complete independently, so callers
    can await either key without waiting for the other. The pool is created
    on first use.
    """

    def __init__(self, keys_dir: Union[str, Path] = "keys", executor: Optional[Executor] = None):
        self.keys_dir = Path(keys_dir)
        self._executor = executor

    @property
    def executor(self) -> Executor:
        if self._executor is None:
            self._executor = ThreadPoolExecutor(max_workers=2, thread_name_prefix="key-loader")
        return self._executor

    def load_public_key(self) -> KeyHandle:
        path = (self.keys_dir / PUBLIC_KEY_FILE).resolve()
        return KeyHandle(path, self.executor.submit(read_public_key, path))

    def load_private_key(self) -> KeyHandle:
        path = (self.keys_dir / PRIVATE_KEY_FILE).resolve()
        return KeyHandle(path, self.executor.submit(read_private_key, path))
