"""
OTUN - Telegram Notifications
Delivers report chunks through the Telegram Bot HTTP API.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional

import requests

from notifier.chunker import Chunk

logger = logging.getLogger(__name__)


TELEGRAM_API_URL = "https://api.telegram.org"
HTTP_TIMEOUT = 30


@dataclass(frozen=True)
class TelegramCredentials:
    """Bot token and destination chat."""
    bot_token: str
    chat_id: str

    def __repr__(self) -> str:
        return f"TelegramCredentials(bot_token='***', chat_id={self.chat_id!r})"


@dataclass(frozen=True)
class DispatchOutcome:
    """Result of sending one chunk."""
    ordinal: int
    success: bool
    status_code: Optional[int] = None
    error: Optional[str] = None


class NotificationDispatcher:
    """Sends report chunks to a Telegram chat, one message per chunk."""

    def __init__(
        self,
        credentials: TelegramCredentials,
        session: Optional[requests.Session] = None,
        timeout: int = HTTP_TIMEOUT,
    ):
        """
        Initialize the dispatcher.

        Args:
            credentials: Bot token and chat id.
            session: HTTP session to send with. A new one is created if omitted.
            timeout: Per-request timeout in seconds.
        """
        self.credentials = credentials
        self.session = session or requests.Session()
        self.timeout = timeout

    @property
    def send_message_url(self) -> str:
        return f"{TELEGRAM_API_URL}/bot{self.credentials.bot_token}/sendMessage"

    def send(self, chunk: Chunk) -> DispatchOutcome:
        """
        Send a single chunk.

        Returns:
            DispatchOutcome; failures are reported, never raised.
        """
        try:
            response = self.session.post(
                self.send_message_url,
                data={"chat_id": self.credentials.chat_id, "text": chunk.text},
                timeout=self.timeout,
            )
            response.raise_for_status()
        except requests.HTTPError as e:
            status = e.response.status_code if e.response is not None else None
            logger.warning(f"Telegram rejected chunk {chunk.ordinal}: HTTP {status}")
            return DispatchOutcome(chunk.ordinal, False, status_code=status, error=f"HTTP {status}")
        except requests.RequestException as e:
            # Exception text may embed the URL, which holds the bot token
            error = type(e).__name__
            logger.warning(f"Failed to send chunk {chunk.ordinal}: {error}")
            return DispatchOutcome(chunk.ordinal, False, error=error)

        logger.info(f"Sent chunk {chunk.ordinal} ({len(chunk.text)} characters)")
        return DispatchOutcome(chunk.ordinal, True, status_code=response.status_code)

    def dispatch(self, chunks: Iterable[Chunk]) -> List[DispatchOutcome]:
        """
        Send chunks strictly in order.

        A failed chunk does not stop the remaining ones. Nothing is retried.

        Returns:
            One DispatchOutcome per chunk, in order.
        """
        outcomes = [self.send(chunk) for chunk in chunks]
        failed = sum(1 for o in outcomes if not o.success)
        if failed:
            logger.warning(f"{failed} of {len(outcomes)} chunks could not be delivered")
        return outcomes
