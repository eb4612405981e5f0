"""Random identifier generation.

This module pairs a GeneratorConfig with a source of cryptographically secure
random bytes. Identifiers can be generated on the calling thread or awaited
from a coroutine; in both cases the bytes are encoded by uidgen.encoder.
"""

import asyncio
import logging
import secrets
from typing import Awaitable, Callable, Optional

from uidgen.config import GeneratorConfig
from uidgen.encoder import encode
from uidgen.errors import InvalidArgumentTypeError

# Configure logging
logger = logging.getLogger(__name__)

RandomSource = Callable[[int], bytes]
AsyncRandomSource = Callable[[int], Awaitable[bytes]]


class UIDGenerator:
    """Generates fixed-length random identifiers.

    The generator holds no mutable state beyond its immutable configuration,
    so one instance can serve any number of threads or tasks concurrently.
    Errors raised by the random source are propagated unchanged.
    """

    def __init__(
        self,
        config: Optional[GeneratorConfig] = None,
        random_source: Optional[RandomSource] = None,
        async_random_source: Optional[AsyncRandomSource] = None,
    ):
        """Initialize ID generator.

        Args:
            config: Resolved configuration (default: 128 bits, BASE58)
            random_source: Blocking byte source (default: secrets.token_bytes)
            async_random_source: Optional coroutine byte source; when omitted,
                generate_async runs random_source in the default executor
        """
        if config is None:
            config = GeneratorConfig.default()
        elif not isinstance(config, GeneratorConfig):
            raise InvalidArgumentTypeError(
                f"config must be a GeneratorConfig, not {type(config).__name__}"
            )

        self.config = config
        self._random_source = random_source or secrets.token_bytes
        self._async_random_source = async_random_source

        logger.debug(f"ID generator initialized: {config}")

    @property
    def alphabet(self) -> str:
        return self.config.alphabet

    @property
    def base(self) -> int:
        return self.config.base

    @property
    def bit_size(self) -> int:
        return self.config.bit_size

    @property
    def byte_count(self) -> int:
        return self.config.byte_count

    @property
    def uid_length(self) -> int:
        return self.config.output_length

    def generate(self) -> str:
        """Generate an identifier, blocking until random bytes are available.

        Returns:
            Identifier of exactly uid_length symbols
        """
        return encode(self.config, self.random_bytes())

    def random_bytes(self) -> bytes:
        """Request byte_count bytes from the blocking random source."""
        return self._random_source(self.config.byte_count)

    async def generate_async(self) -> str:
        """Generate an identifier without blocking the event loop.

        The coroutine suspends only while the random bytes are requested.

        Returns:
            Identifier of exactly uid_length symbols
        """
        if self._async_random_source is not None:
            data = await self._async_random_source(self.config.byte_count)
        else:
            loop = asyncio.get_running_loop()
            data = await loop.run_in_executor(
                None, self._random_source, self.config.byte_count
            )
        return encode(self.config, data)

    def generate_many(self, count: int) -> list[str]:
        """Generate count independent identifiers.

        Raises:
            InvalidArgumentTypeError: If count is not an int
            ValueError: If count is not positive
        """
        _check_count(count)
        return [self.generate() for _ in range(count)]

    async def generate_many_async(self, count: int) -> list[str]:
        """Generate count independent identifiers concurrently."""
        _check_count(count)
        uids = await asyncio.gather(*(self.generate_async() for _ in range(count)))
        return list(uids)

    def __repr__(self) -> str:
        return (
            f"UIDGenerator(base={self.base}, bit_size={self.bit_size}, "
            f"uid_length={self.uid_length})"
        )


def _check_count(count: int) -> None:
    if isinstance(count, bool) or not isinstance(count, int):
        raise InvalidArgumentTypeError(
            f"count must be an integer, not {type(count).__name__}"
        )
    if count <= 0:
        raise ValueError(f"count must be a positive integer, got {count}")
