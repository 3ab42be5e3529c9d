from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import requests

from ..core.cache import FileCache
from ..core.errors import LookupFailedError, ToolServiceError, UpstreamAPIError, UpstreamDataError, UpstreamNetworkError
from ..core.schemas import ExchangeRate

logger = logging.getLogger(__name__)

EXCHANGE_RATE_BASE_URL = "https://open.er-api.com/v6/latest/"
FAILURE_PREFIX = "환율 데이터 가져오기 실패: "


def get_exchange_rate(
    base: str,
    target: str,
    cache: Optional[FileCache] = None,
    api_url: str = EXCHANGE_RATE_BASE_URL,
    timeout_s: int = 30,
) -> ExchangeRate:
    """Rate from `base` to `target` (ISO currency codes, e.g. KRW, USD, JPY).

    The whole rate table for `base` is fetched (and cached), then `target`
    is looked up in it.
    """
    base = base.strip().upper()
    target = target.strip().upper()
    try:
        table = _rate_table(base, cache, api_url, timeout_s)
        rate = (table.get("rates") or {}).get(target)
        if rate is None:
            raise LookupFailedError(f"대상 통화({target})에 대한 환율 정보를 찾을 수 없습니다.")
        return ExchangeRate(
            base=base,
            target=target,
            rate=float(rate),
            date=table.get("time_last_update_utc"),
        )
    except ToolServiceError as e:
        logger.error("Exchange rate %s->%s failed: %s", base, target, e)
        raise type(e)(f"{FAILURE_PREFIX}{e}") from e
    except (AttributeError, TypeError, ValueError) as e:
        raise UpstreamDataError(f"{FAILURE_PREFIX}unexpected response ({e})") from e


def _rate_table(base: str, cache: Optional[FileCache], api_url: str, timeout_s: int) -> Dict[str, Any]:
    def fetch() -> Dict[str, Any]:
        try:
            r = requests.get(f"{api_url}{base}", timeout=timeout_s)
        except requests.RequestException as e:
            raise UpstreamNetworkError(str(e)) from e
        if r.status_code >= 400:
            raise UpstreamAPIError(f"Exchange rate request failed ({r.status_code}).")
        data = r.json()
        if not isinstance(data, dict) or data.get("result") != "success":
            raise UpstreamAPIError("환율 데이터 조회 실패")
        return data

    if cache:
        return cache.get_or_fetch(f"exchange-rate:{base}", fetch)
    return fetch()
