from collections import deque
from os import getenv

from dotenv import load_dotenv
from loguru import logger

from clashapi.client import ClashClient
from clashapi.utility.http import Route
from clashapi.utility.keycreation import create_keys

# Load environment variables from .env file
load_dotenv()


def _split(value: str) -> list:
    return [v.strip() for v in value.split(",") if v.strip()]


class Config:
    def __init__(self):
        """
        Initialize the Config object from the environment.

        Keys come from COC_API_TOKENS, or are created on the developer portal
        for the COC_EMAIL/COC_PASSWORD accounts when `initialize` runs.
        """
        self.coc_tokens = _split(getenv("COC_API_TOKENS", ""))
        self.coc_emails = _split(getenv("COC_EMAIL", ""))
        self.coc_passwords = _split(getenv("COC_PASSWORD", ""))
        if not self.coc_tokens and not self.coc_emails:
            raise ValueError("COC_API_TOKENS or COC_EMAIL/COC_PASSWORD must be set in the environment variables.")
        if len(self.coc_emails) != len(self.coc_passwords):
            raise ValueError("COC_EMAIL and COC_PASSWORD must list the same number of accounts.")

        self.key_name = getenv("COC_KEY_NAME", "clashapi")
        self.key_count = int(getenv("COC_KEY_COUNT", "1"))
        self.base_url = getenv("COC_API_BASE_URL", Route.BASE)
        self.throttle_limit = int(getenv("COC_THROTTLE_LIMIT", "30"))
        self.request_timeout = float(getenv("COC_REQUEST_TIMEOUT", "30"))

        self.keys = deque(self.coc_tokens)

    async def initialize(self):
        """Create the developer portal keys of the configured accounts."""
        if self.coc_emails:
            keys = await create_keys(
                emails=self.coc_emails,
                passwords=self.coc_passwords,
                key_name=self.key_name,
                key_count=self.key_count,
                as_list=True,
            )
            self.keys.extend(keys)
        logger.info(f"Loaded {len(self.keys)} API keys")

    def get_coc_client(self) -> ClashClient:
        if not self.keys:
            raise RuntimeError("No API keys loaded, call initialize() first.")
        return ClashClient(
            keys=list(self.keys),
            base_url=self.base_url,
            throttle_limit=self.throttle_limit,
            timeout=self.request_timeout,
        )
