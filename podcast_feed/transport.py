"""HTTP retrieval of feed documents."""

import threading
from typing import Optional

import requests
from tqdm import tqdm

from .exceptions import PodcastCancelledError, PodcastFailedError, PodcastTimeoutError
from .logger import logger

USER_AGENT = "podcast_feed Python/1.0"
DEFAULT_TIMEOUT = 20000
DOWNLOAD_CHUNK_SIZE = 8192


def _check_cancelled(url: str, cancel_event: Optional[threading.Event]):
    if cancel_event is not None and cancel_event.is_set():
        raise PodcastCancelledError(f"Request to {url} was cancelled", url=url)


def _read_body(response, url: str, cancel_event, show_progress: bool) -> bytes:
    """Stream the response body, honouring cancellation between chunks."""
    # Only sizes the progress bar, so a garbled header is ignored
    try:
        total_size = int(response.headers.get("content-length") or 0)
    except (TypeError, ValueError):
        total_size = 0
    progress_bar = tqdm(
        total=total_size or None, unit="B", unit_scale=True, disable=not show_progress
    )
    chunks = []
    try:
        for chunk in response.iter_content(chunk_size=DOWNLOAD_CHUNK_SIZE):
            _check_cancelled(url, cancel_event)
            chunks.append(chunk)
            progress_bar.update(len(chunk))
    finally:
        progress_bar.close()
    return b"".join(chunks)


def fetch_feed(
    url: str,
    timeout: int = DEFAULT_TIMEOUT,
    cancel_event: Optional[threading.Event] = None,
    show_progress: bool = False,
) -> bytes:
    """Download a feed document.

    Args:
        url: Feed URL
        timeout: Connect and read timeout in milliseconds
        cancel_event: Optional event; once set the download is aborted
        show_progress: Render a progress bar while downloading

    Returns:
        Raw response body

    Raises:
        PodcastTimeoutError: On timeouts and connection failures
        PodcastFailedError: On error statuses and malformed responses
        PodcastCancelledError: If cancel_event is set before the body is read
    """
    _check_cancelled(url, cancel_event)
    logger.info(f"Fetching feed from: {url}")

    seconds = timeout / 1000
    response = None
    try:
        response = requests.get(
            url,
            headers={"User-Agent": USER_AGENT},
            timeout=(seconds, seconds),
            stream=True,
        )
        response.raise_for_status()
        return _read_body(response, url, cancel_event, show_progress)
    except requests.exceptions.Timeout as e:
        raise PodcastTimeoutError(str(e), url=url) from e
    except requests.exceptions.HTTPError as e:
        raise PodcastFailedError(str(e), url=url) from e
    except requests.exceptions.ConnectionError as e:
        # Unreachable hosts land in the same bucket as timeouts
        raise PodcastTimeoutError(str(e), url=url) from e
    except requests.exceptions.RequestException as e:
        raise PodcastFailedError(str(e), url=url) from e
    finally:
        if response is not None:
            response.close()
