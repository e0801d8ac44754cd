from urllib.parse import unquote

from walletlink.retry import retry
from walletlink.browser import Browser
import walletlink.config as config


class YesCoinService(Browser):

    ORIGIN = config.YESCOIN["origin"]

    def auth_headers(self):
        return {"token": self.token}


    @retry("YesCoin", to_raise=False)
    async def login(self, query: str):
        r = await self.send_request(
            method="POST",
            url=config.YESCOIN["login"],
            json={"code": unquote(query)},
        )
        response = r.json()
        if response.get("code") != 0 or not response.get("data", {}).get("token"):
            raise Exception(f'Unexpected login response: {r.text}')
        return response["data"]["token"]


    async def wallet_request(self, url: str, payload: dict):
        r = await self.send_request(
            method="POST",
            url=url,
            json=payload,
            headers=self.auth_headers(),
        )
        response = r.json()
        if response.get("code") != 0:
            raise Exception(response.get("message") or r.text)
        return True


    @retry("YesCoin", to_raise=False)
    async def connect_wallet(self):
        return await self.wallet_request(
            url=config.YESCOIN["connect"],
            payload={
                "walletType": 1,
                "publicKey": self.wallet.public_key.hex(),
                "friendlyAddress": self.wallet.address,
                "rawAddress": self.wallet.raw_address,
            },
        )


    @retry("YesCoin", to_raise=False)
    async def disconnect_wallet(self):
        return await self.wallet_request(
            url=config.YESCOIN["disconnect"],
            payload={"friendlyAddress": self.wallet.address},
        )
