from curl_cffi.requests import AsyncSession
from loguru import logger

from walletlink.utils import format_proxy
from walletlink.retry import have_json
from walletlink.wallet import TonWallet


class Browser:
    """Shared HTTP session for a single account on a single platform.

    Platform services subclass it, fill in ORIGIN and add connect_wallet()
    and disconnect_wallet(). Platforms with a separate auth call also add
    login(), which returns a token or a falsy value. init() returns True when
    the service is ready for wallet operations.
    """

    ORIGIN: str = ""
    USER_AGENT: str = ("Mozilla/5.0 (Linux; Android 14; Pixel 8) AppleWebKit/537.36 (KHTML, like Gecko) "
                       "Chrome/131.0.0.0 Mobile Safari/537.36")

    def __init__(self, proxy: str | None = None, label: str = ""):
        self.proxy = format_proxy(proxy)
        self.label = label

        self.token = None
        self.wallet: TonWallet | None = None
        self.session = self.get_new_session()


    def get_new_session(self):
        session = AsyncSession(
            impersonate="chrome131",
            headers={
                "User-Agent": self.USER_AGENT,
                "Origin": self.ORIGIN,
                "Referer": f"{self.ORIGIN}/",
            }
        )
        if self.proxy:
            session.proxies.update({'http': self.proxy, 'https': self.proxy})

        return session


    @have_json
    async def send_request(self, **kwargs):
        if kwargs.get("method"): kwargs["method"] = kwargs["method"].upper()
        return await self.session.request(**kwargs)


    def auth_headers(self):
        return {"Authorization": f"Bearer {self.token}"}


    def init(self, token: str, wallet: TonWallet):
        self.token = token
        self.wallet = wallet
        return bool(self.token) and wallet is not None


    async def close(self):
        try:
            await self.session.close()
        except Exception as err:
            logger.debug(f'[•] {self.label} | Failed to close session: {err}')
