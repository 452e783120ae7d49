from base64 import urlsafe_b64decode
from collections import deque
from typing import Iterable, List, Optional, Tuple, Union

import aiohttp
import coc
import msgspec
import pendulum as pend
from loguru import logger

from clashapi.classes import DeveloperKey, DeveloperKeyList, DeveloperKeyResponse, DeveloperLogin
from clashapi.utility.decoding import decode

DEVELOPER_API_URL = "https://developer.clashofclans.com/api"
KEY_API_URL = f"{DEVELOPER_API_URL}/apikey"

# the developer portal refuses to create more keys than this per account
MAX_KEYS_PER_ACCOUNT = 10


def ip_from_token(token: str) -> str:
    """Read the IP the portal saw the login come from, out of the temporary API token (a JWT)."""
    payload = token.split(".")[1]
    claims = msgspec.json.decode(urlsafe_b64decode(payload + "=" * (-len(payload) % 4)))
    cidr = next((limit["cidrs"][0] for limit in claims.get("limits", []) if limit.get("cidrs")), None)
    if cidr is None:
        raise RuntimeError("The developer portal token does not carry the IP of this login")
    return cidr.split("/")[0]


def _raise_for_status(resp, action: str):
    if resp.status != 200:
        raise coc.HTTPException(resp.status, {"reason": "developerPortal", "message": f"{action} failed"})


async def login(session: aiohttp.ClientSession, email: str, password: str) -> str:
    """
    Log in to the developer portal. The session keeps the auth cookie for the
    key endpoints.

    :return: the IP address the keys must be bound to
    """
    resp = await session.post(f"{DEVELOPER_API_URL}/login", json={"email": email, "password": password})
    if resp.status == 403:
        raise coc.InvalidCredentials()
    _raise_for_status(resp, "Developer portal login")

    payload = decode(await resp.read(), type=DeveloperLogin)
    if not payload.temporaryAPIToken:
        raise RuntimeError("The developer portal login answered without a temporary API token")
    return ip_from_token(payload.temporaryAPIToken)


async def fetch_keys(session: aiohttp.ClientSession) -> Tuple[DeveloperKey, ...]:
    resp = await session.post(f"{KEY_API_URL}/list")
    _raise_for_status(resp, "Listing keys")
    return decode(await resp.read(), type=DeveloperKeyList).keys or ()


async def create_key(session: aiohttp.ClientSession, ip: str, name: str) -> DeveloperKey:
    data = {
        "name": name,
        "description": "Created on {}".format(pend.now(tz=pend.UTC).to_datetime_string()),
        "cidrRanges": [ip],
        "scopes": ["clash"],
    }
    resp = await session.post(f"{KEY_API_URL}/create", json=data)
    if resp.status != 200:
        raise RuntimeError("Failed to generate new key")
    return decode(await resp.read(), type=DeveloperKeyResponse).key


async def revoke_key(session: aiohttp.ClientSession, key_id: str):
    await session.post(f"{KEY_API_URL}/revoke", json={"id": key_id})


def get_valid_keys(keys: Iterable[DeveloperKey], ip: str, key_name: Optional[str] = None) -> List[str]:
    """Tokens of the keys usable from `ip`, optionally only the ones called `key_name`."""
    return [
        key.key for key in keys
        if ip in (key.cidrRanges or ()) and (key_name is None or key.name == key_name)
    ]


async def get_keys(session: aiohttp.ClientSession, email: str, password: str, key_name: str, key_count: int) -> List[str]:
    """
    Return up to `key_count` tokens of one account for the current IP.

    Keys bound to another IP are revoked, since they cannot be used from here,
    and new keys are created until `key_count` is reached or the account is full.
    """
    ip = await login(session, email=email, password=password)
    keys = await fetch_keys(session)
    _keys = get_valid_keys(keys, ip, key_name=key_name)

    for key in (k for k in keys if ip not in (k.cidrRanges or ())):
        logger.info(f"Revoking key {key.name} bound to {key.cidrRanges}")
        await revoke_key(session, key.id)

    free_slots = MAX_KEYS_PER_ACCOUNT - len([k for k in keys if ip in (k.cidrRanges or ())])
    while len(_keys) < key_count and free_slots > 0:
        key = await create_key(session, ip=ip, name=key_name)
        _keys.append(key.key)
        free_slots -= 1

    if not _keys:
        raise RuntimeError(
            "There are {} API keys already created and none match a key_name of '{}'. "
            "Please specify a key_name kwarg, or go to 'https://developer.clashofclans.com' to delete "
            "unused keys.".format(len(keys), key_name)
        )
    if len(_keys) < key_count:
        logger.warning(
            f"{key_count} keys were requested to be used, but a maximum of {len(_keys)} could be "
            f"found/made on the developer site, as it has a maximum of {MAX_KEYS_PER_ACCOUNT} keys per account. "
            f"Please delete some keys or lower your `key_count` level."
        )

    logger.info(f"Loaded {len(_keys)} keys for {email}")
    return _keys


async def create_keys(
    emails: List[str], passwords: List[str], key_name: str = "clashapi", key_count: int = 1, as_list: bool = False
) -> Union[deque, list]:
    if len(emails) != len(passwords):
        raise ValueError("emails and passwords must have the same length")

    total_keys = []
    for email, password in zip(emails, passwords):
        async with aiohttp.ClientSession() as session:
            total_keys.extend(
                await get_keys(session, email=email, password=password, key_name=key_name, key_count=key_count)
            )

    if as_list:
        return total_keys
    return deque(total_keys)
