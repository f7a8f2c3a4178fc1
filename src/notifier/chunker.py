"""
OTUN - Message Chunker
Splits a report into pieces that fit in one Telegram message.
"""

import logging
from dataclasses import dataclass
from typing import Union

logger = logging.getLogger(__name__)


# Maximum message length for Telegram is 4096 characters
MAX_MESSAGE_LENGTH = 4096

# Headroom left for the transport's own encoding overhead
SAFETY_MARGIN = 256


@dataclass(frozen=True)
class Chunk:
    """A slice of the report sent as one message."""
    text: str
    ordinal: int  # 1-based position in the sequence

    def __len__(self) -> int:
        return len(self.text)


def chunk_message(
    body: Union[str, list[str]],
    max_length: int = MAX_MESSAGE_LENGTH,
    margin: int = SAFETY_MARGIN,
) -> list[Chunk]:
    """
    Split a report body into chunks without breaking any line.

    A body that fits in max_length is returned whole. Longer bodies are
    packed greedily, line by line, into chunks of at most
    max_length - margin characters. A single line longer than that is
    sent on its own, unsplit.

    Args:
        body: Report text or its lines.
        max_length: Transport limit per message.
        margin: Characters reserved below max_length when splitting.

    Returns:
        Chunks in order. Joining their texts with "\\n" gives back the body.
    """
    if max_length <= 0 or margin < 0 or margin >= max_length:
        raise ValueError(f"Invalid chunk limits: max_length={max_length}, margin={margin}")

    lines = body.split("\n") if isinstance(body, str) else list(body)
    text = "\n".join(lines)
    if not text and len(lines) <= 1:
        return []
    if len(text) <= max_length:
        return [Chunk(text=text, ordinal=1)]

    limit = max_length - margin
    chunks: list[Chunk] = []
    buffer: list[str] = []
    size = 0

    for line in lines:
        needed = len(line) + 1  # line plus its line break
        if buffer and size + needed > limit:
            chunks.append(Chunk(text="\n".join(buffer), ordinal=len(chunks) + 1))
            buffer, size = [], 0
        buffer.append(line)
        size += needed

    if buffer:
        chunks.append(Chunk(text="\n".join(buffer), ordinal=len(chunks) + 1))

    oversized = [c.ordinal for c in chunks if len(c) > max_length]
    if oversized:
        logger.warning(f"Chunks {oversized} hold a single line longer than {max_length} characters")
    logger.info(f"Split {len(text)} characters into {len(chunks)} chunks")
    return chunks
