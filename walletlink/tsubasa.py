from urllib.parse import unquote
import json

from walletlink.retry import retry
from walletlink.browser import Browser
from walletlink.wallet import TonWallet
import walletlink.config as config


class TsubasaService(Browser):
    """Tsubasa has no separate login: the Telegram init data is sent with every call."""

    ORIGIN = config.TSUBASA["origin"]

    def init(self, token: str, wallet: TonWallet):
        initialized = super().init(token, wallet)
        player_id = self.get_player_id(token)
        if player_id:
            self.session.headers.update({"X-Player-Id": player_id})
        return initialized


    @staticmethod
    def get_player_id(init_data: str):
        try:
            user_data = json.loads(unquote(init_data.split("user=")[1].split("&")[0]))
            return str(user_data["id"])
        except (IndexError, KeyError, ValueError):
            return None


    async def wallet_request(self, url: str, payload: dict):
        r = await self.send_request(
            method="POST",
            url=url,
            json={"initData": self.token, **payload},
        )
        response = r.json()
        if r.status_code != 200 or response.get("error"):
            raise Exception(response.get("message") or response.get("error") or r.text)
        return True


    @retry("Tsubasa", to_raise=False)
    async def connect_wallet(self):
        return await self.wallet_request(
            url=config.TSUBASA["connect"],
            payload={"wallet_address": self.wallet.address},
        )


    @retry("Tsubasa", to_raise=False)
    async def disconnect_wallet(self):
        return await self.wallet_request(
            url=config.TSUBASA["disconnect"],
            payload={},
        )
