import logging

import requests

from binbot.errors import TransportError

logger = logging.getLogger(__name__)


def build_session(user_agent: str) -> requests.Session:
    session = requests.Session()
    session.headers.update({"User-Agent": user_agent})
    return session


def fetch_schedule(session: requests.Session, url: str, timeout: float = 20) -> str:
    logger.info("Fetching bin schedule from %s", url)
    try:
        response = session.get(url, timeout=timeout)
        response.raise_for_status()
    except requests.RequestException as e:
        raise TransportError(str(e)) from e
    return response.text
