# Utils package
import logging
from fake_useragent import UserAgent

FALLBACK_USER_AGENT = "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"


def get_user_agent():
    try:
        return UserAgent().random
    except Exception:
        return FALLBACK_USER_AGENT


def capitalize_key(key):
    """Upper-case the first character only ("vintage" -> "Vintage")."""
    if not key:
        return ""
    return key[:1].upper() + key[1:]


def setup_logging(log_file=None, level=logging.INFO):
    handlers = [logging.StreamHandler()]
    if log_file:
        handlers.insert(0, logging.FileHandler(log_file, encoding="utf-8"))
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(message)s",
        handlers=handlers,
    )
