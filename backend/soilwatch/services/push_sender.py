"""Push notification sender service using the Expo push API."""
import logging
from dataclasses import dataclass
from typing import Optional

import httpx

logger = logging.getLogger(__name__)


@dataclass
class PushConfig:
    """Expo push configuration."""
    enabled: bool = False
    url: str = "https://exp.host/--/api/v2/push/send"
    timeout_seconds: float = 10.0


class PushSenderService:
    """Service for sending push notifications to Expo push tokens."""
    
    def __init__(self, config: PushConfig, transport: Optional[httpx.AsyncBaseTransport] = None):
        self._config = config
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None
        
        if not config.enabled:
            logger.info("Push notifications are disabled")
    
    @property
    def enabled(self) -> bool:
        return self._config.enabled
    
    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self._config.timeout_seconds,
                transport=self._transport,
            )
        return self._client
    
    async def send_notification(
        self,
        expo_token: str,
        title: str,
        body: str,
        data: Optional[dict] = None,
    ) -> bool:
        """Send a push notification to a single device.
        
        Args:
            expo_token: The Expo push token of the device
            title: Notification title
            body: Notification body text
            data: Additional data payload
            
        Returns:
            True if Expo accepted the notification. Failures are logged,
            never raised.
        """
        if not self._config.enabled:
            logger.debug("Push notifications not configured, skipping")
            return False
        
        message = {
            "to": expo_token,
            "sound": "default",
            "title": title,
            "body": body,
            "data": data or {},
        }
        
        try:
            response = await self._get_client().post(
                self._config.url,
                json=message,
                headers={
                    "Accept": "application/json",
                    "Accept-Encoding": "gzip, deflate",
                },
            )
            response.raise_for_status()
            tickets = response.json().get("data")
        except (httpx.HTTPError, ValueError, AttributeError) as e:
            logger.error(f"Failed to send push notification: {e}")
            return False
        
        # Expo answers a single message with one ticket, a batch with a list
        if isinstance(tickets, dict):
            tickets = [tickets]
        if not isinstance(tickets, list):
            tickets = []
        
        if any(isinstance(t, dict) and t.get("status") == "ok" for t in tickets):
            logger.info(f"Push notification sent to {expo_token[:24]}...")
            return True
        
        logger.warning(f"Push notification rejected by Expo: {tickets} (token: {expo_token[:24]}...)")
        return False
    
    async def close(self):
        if self._client is not None:
            await self._client.aclose()
            self._client = None
