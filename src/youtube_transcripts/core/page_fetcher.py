"""
HTTP fetching for YouTube pages and caption tracks.

Provides:
- A single pooled aiohttp session shared by every concurrent fetch
- Fixed-delay retries on transport errors, non-200 statuses and empty bodies
- The consent-cookie handshake some regions require before serving the watch page
"""

import asyncio
import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Awaitable, Callable, Dict, Optional, Tuple

import aiohttp

from .config import config, NetworkConfig, YouTubeConfig
from .exceptions import ConsentRequiredError, FetchExhaustedError
from ..utils.logging import get_logger

logger = get_logger("page_fetcher")

CONSENT_MARKER = re.compile(rb"https://consent\.youtube\.com/s")
CONSENT_VALUE = re.compile(rb'name="v" value="(.*?)"')


@dataclass(frozen=True)
class ConsentCookie:
    """The CONSENT cookie that acknowledges the regional consent gate."""
    value: str
    domain: str = ".youtube.com"
    name: str = "CONSENT"

    @property
    def header(self) -> str:
        """Value for the Cookie request header."""
        return f"{self.name}={self.value}"


class ConsentState(Enum):
    """Progress of a consent negotiation. Each request moves forward at most once."""
    UNAUTHENTICATED = "unauthenticated"
    CONSENT_NEGOTIATED = "consent_negotiated"
    RETRIED = "retried"


def consent_required(body: bytes) -> bool:
    """Check whether a response body is the consent redirect page."""
    return CONSENT_MARKER.search(body) is not None


class PageFetcher:
    """Fetches pages over a shared connection pool with retry and consent handling."""

    def __init__(
        self,
        network_config: Optional[NetworkConfig] = None,
        youtube_config: Optional[YouTubeConfig] = None,
        session: Optional[aiohttp.ClientSession] = None
    ):
        self.network = network_config or config.network
        self.youtube = youtube_config or config.youtube
        self.max_attempts = max(1, self.network.max_attempts)
        self.retry_delay = self.network.retry_delay

        self._session = session
        self._owns_session = session is None

        logger.debug(
            f"Initialized PageFetcher (attempts={self.max_attempts}, delay={self.retry_delay}s)"
        )

    async def __aenter__(self) -> "PageFetcher":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    async def _get_session(self) -> aiohttp.ClientSession:
        """Get or create HTTP session with connection pooling."""
        if self._session is None or self._session.closed:
            connector = aiohttp.TCPConnector(
                limit=self.network.max_connections,
                limit_per_host=self.network.max_connections_per_host,
                keepalive_timeout=self.network.keepalive_timeout,
            )
            timeout = aiohttp.ClientTimeout(total=self.network.request_timeout)
            self._session = aiohttp.ClientSession(connector=connector, timeout=timeout)
            self._owns_session = True
            logger.debug("Created new HTTP session with connection pooling")

        return self._session

    async def close(self) -> None:
        """Close the pooled session if this fetcher created it."""
        if self._session is not None and self._owns_session and not self._session.closed:
            await self._session.close()
        if self._owns_session:
            self._session = None

    async def _request(
        self,
        method: str,
        url: str,
        cookie: Optional[ConsentCookie] = None,
        payload: Optional[Dict[str, Any]] = None
    ) -> Tuple[int, bytes]:
        """Send one request and return (status, body)."""
        session = await self._get_session()
        headers = {"Accept-Language": self.network.accept_language}
        if cookie is not None:
            headers["Cookie"] = cookie.header

        async with session.request(method, url, headers=headers, json=payload) as response:
            body = await response.read()
            return response.status, body

    async def _request_with_retries(
        self,
        method: str,
        url: str,
        cookie: Optional[ConsentCookie] = None,
        payload: Optional[Dict[str, Any]] = None
    ) -> bytes:
        last_error = None

        for attempt in range(1, self.max_attempts + 1):
            try:
                status, body = await self._request(method, url, cookie, payload)
            except (aiohttp.ClientError, asyncio.TimeoutError) as e:
                last_error = f"{type(e).__name__}: {e}"
            else:
                if status != 200:
                    last_error = f"received status {status}"
                elif not body:
                    last_error = "empty response body"
                else:
                    return body

            logger.warning(f"Attempt {attempt}/{self.max_attempts} for {method} {url} failed: {last_error}")
            if attempt < self.max_attempts:
                await asyncio.sleep(self.retry_delay)

        raise FetchExhaustedError(url, self.max_attempts, last_error)

    async def fetch(self, url: str, cookie: Optional[ConsentCookie] = None) -> bytes:
        """GET a URL, retrying until a non-empty 200 response arrives."""
        return await self._request_with_retries("GET", url, cookie)

    async def post(self, url: str, payload: Dict[str, Any], cookie: Optional[ConsentCookie] = None) -> bytes:
        """POST a JSON payload with the same retry policy as fetch."""
        return await self._request_with_retries("POST", url, cookie, payload)

    async def create_consent_cookie(self, url: str) -> ConsentCookie:
        """
        Build the CONSENT cookie from the token embedded in the consent page.

        Raises:
            ConsentRequiredError: If the page carries no consent token
        """
        html = await self.fetch(url)
        match = CONSENT_VALUE.search(html)
        if match is None:
            raise ConsentRequiredError(url)

        token = match.group(1).decode("utf-8", errors="replace")
        return ConsentCookie(value=f"YES+{token}", domain=self.youtube.consent_cookie_domain)

    async def negotiate_consent(
        self,
        send: Callable[[Optional[ConsentCookie]], Awaitable[bytes]],
        consent_url: str,
        cookie: Optional[ConsentCookie] = None
    ) -> bytes:
        """
        Run a request through the consent gate.

        ``send`` performs the request with an optional cookie. A caller-supplied
        cookie counts as already negotiated, so it is never replaced.

        Args:
            send: Coroutine function issuing the request
            consent_url: Page to scrape the consent token from
            cookie: Cookie to start with, if any

        Returns:
            The last response body, even if it still asks for consent
        """
        state = ConsentState.UNAUTHENTICATED if cookie is None else ConsentState.CONSENT_NEGOTIATED
        body = await send(cookie)

        if state is ConsentState.UNAUTHENTICATED and consent_required(body):
            logger.warning(f"Consent required for {consent_url}, negotiating consent cookie")
            cookie = await self.create_consent_cookie(consent_url)
            state = ConsentState.CONSENT_NEGOTIATED
            body = await send(cookie)
            state = ConsentState.RETRIED

            if consent_required(body):
                logger.warning(f"Consent still required for {consent_url} after retry, using response as-is")

        logger.debug(f"Consent state for {consent_url}: {state.value}")
        return body

    async def fetch_video(self, video_id: str) -> bytes:
        """Fetch the watch page for a video, passing the consent gate if shown."""
        url = self.youtube.watch_url.format(video_id=video_id)
        return await self.negotiate_consent(lambda cookie: self.fetch(url, cookie), url)
