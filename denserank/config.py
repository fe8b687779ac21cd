
import logging
import time
import boto3
from dataclasses import dataclass
from typing import Optional, Dict

logger = logging.getLogger("denserank.config")

@dataclass
class RankingConfig:
    max_items: Optional[int] = None
    check_consistency: bool = False
    log_results: bool = False

class ConfigManager:
    def __init__(self, ttl_seconds: float = 60.0, prefix: str = "/denserank"):
        self.ttl_seconds = ttl_seconds
        self.prefix = prefix.rstrip('/')
        self._cached_config: Optional[RankingConfig] = None
        self._last_fetched_at: float = 0.0
        self._ssm_client = None

    def get_config(self) -> RankingConfig:
        current_time = time.time()

        if self._cached_config and (current_time - self._last_fetched_at < self.ttl_seconds):
            return self._cached_config

        try:
            config = self._fetch_from_ssm()
            self._cached_config = config
            self._last_fetched_at = current_time
            return config
        except Exception as e:
            logger.warning("failed to fetch ranking config, using defaults: %s", e)
            return self._get_default_config()

    def _get_client(self):
        # Created on first fetch so that missing region or credentials fall back to defaults
        if self._ssm_client is None:
            self._ssm_client = boto3.client('ssm')
        return self._ssm_client

    def _name(self, key: str) -> str:
        return f"{self.prefix}/{key}"

    def _fetch_from_ssm(self) -> RankingConfig:
        names = [
            self._name('max_items'),
            self._name('check_consistency'),
            self._name('log_results'),
        ]

        response = self._get_client().get_parameters(Names=names)
        params: Dict[str, str] = {p['Name']: p['Value'] for p in response.get('Parameters', [])}

        # 未設定 / 空 / "none" は上限なし
        max_items_str = params.get(self._name('max_items'), '').strip()
        max_items = None
        if max_items_str and max_items_str.lower() != 'none':
            max_items = int(max_items_str)
            if max_items < 0:
                raise ValueError(f"max_items must be >= 0, got {max_items}")

        # booleans assume "true" (case-insensitive) is True
        check_consistency = params.get(self._name('check_consistency'), 'false').strip().lower() == 'true'
        log_results = params.get(self._name('log_results'), 'false').strip().lower() == 'true'

        return RankingConfig(
            max_items=max_items,
            check_consistency=check_consistency,
            log_results=log_results
        )

    def _get_default_config(self) -> RankingConfig:
        # 上限なし・チェックなし
        return RankingConfig()
