# ABOUTME: AuthSection model holding memoized key-file handles and the consumer group
# ABOUTME: KeyHandle wraps a background read so each key can be awaited independently

import asyncio
from concurrent.futures import Future
from pathlib import Path
from typing import Generator, Any, NamedTuple, Optional

from pydantic import BaseModel, ConfigDict, Field

from .kafka import KafkaConsumerGroup


class KeyHandle:
    """
    Handle to a key file read that was started when the auth section resolved.

    The handle, not the key bytes, is what the resolver memoizes, so repeated
    access never re-issues the read. It can be awaited from any event loop or
    waited on synchronously with ``result()``. A failed read re-raises the same
    error on every await.
    """

    def __init__(self, path: Path, future: "Future[Optional[bytes]]"):
        self.path = path
        self._future = future

    def done(self) -> bool:
        return self._future.done()

    def result(self, timeout: Optional[float] = None) -> Optional[bytes]:
        """Block until the read finishes and return the key bytes (or None)."""
        return self._future.result(timeout)

    def __await__(self) -> Generator[Any, None, Optional[bytes]]:
        return asyncio.wrap_future(self._future).__await__()

    def __repr__(self) -> str:
        state = "done" if self.done() else "pending"
        return f"KeyHandle(path={str(self.path)!r}, {state})"


class KeyPair(NamedTuple):
    public_key: bytes
    private_key: Optional[bytes]


class AuthSection(BaseModel):
    """
    Asymmetric key material and messaging consumer group of the service.

    ``public_key`` resolves to the key bytes or fails with
    ``MissingPublicKeyError``; ``private_key`` resolves to the key bytes or
    ``None`` when the file is absent, which is the normal case for services
    that only verify signatures.

    The section memoizes the handles, not their outcome. A failed public key
    read therefore stays failed for the lifetime of the resolver: adding the
    file afterwards takes a restart (or a new ServiceConfig) to be seen.
    """

    public_key: KeyHandle = Field(description="Handle to the public key read")
    private_key: KeyHandle = Field(description="Handle to the private key read; resolves to None when absent")
    kafka: KafkaConsumerGroup

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    async def key_pair(self) -> KeyPair:
        """Await both keys concurrently."""
        public_key, private_key = await asyncio.gather(self.public_key, self.private_key)
        return KeyPair(public_key, private_key)
